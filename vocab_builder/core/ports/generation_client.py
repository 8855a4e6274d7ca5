# vocab_builder\core\ports\generation_client.py
from typing import Protocol
from vocab_builder.core.domain.models import GenerationFilter

class IGenerationClient(Protocol):
    """
    Port for the remote AI vocabulary generator.

    One call is one batch: the client asks the service for new entries,
    stores them, and reports how many were actually new. Retries and
    timeouts are the client's own concern.
    """

    async def generate(self, selection: GenerationFilter) -> int:
        """
        Generates and persists one batch of vocabulary.

        Args:
            selection: Level, category and type to generate for.

        Returns:
            The number of entries added to the store.

        Raises:
            GenerationError: quota exceeded, network failure, invalid
                credential or malformed response.
        """
        ...
