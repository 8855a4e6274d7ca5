# vocab_builder/core/ports/llm_port.py
from typing import Protocol

class ILanguageModel(Protocol):
    """
    Port (Interface) for Language Model interactions.
    Adapters (like GeminiAdapter) must implement this.
    """

    async def generate_text(self, prompt: str) -> str:
        """Generates text from a prompt."""
        ...
