# vocab_builder\core\ports\__init__.py
"""
Core Ports (Interfaces).

This package defines the Protocols that the Infrastructure Adapters must
implement. They let the use cases talk to the vocabulary store, the AI
generation service, the credential store and the event bus without knowing
the implementation details.
"""

from .credential_store import ICredentialStore
from .generation_client import IGenerationClient
from .llm_port import ILanguageModel
from .message_broker import IMessageBroker
from .vocabulary_store import IVocabularyStore

__all__ = [
    "ICredentialStore",
    "IGenerationClient",
    "ILanguageModel",
    "IMessageBroker",
    "IVocabularyStore",
]
