# vocab_builder\core\ports\vocabulary_store.py
from typing import Protocol, Optional, List, Sequence
from vocab_builder.core.domain.models import VocabularyEntry, VocabType

class IVocabularyStore(Protocol):
    """
    Port for the persistent vocabulary collection.
    Implementations could be a JSON file, an in-memory dict, or a database.
    """

    async def insert_if_new(self, entries: Sequence[VocabularyEntry]) -> int:
        """
        Persists every entry whose identity is not stored yet.

        The whole batch is processed even when some entries are duplicates,
        and the check-then-write must be atomic with respect to overlapping
        calls. New entries are visible to reads as soon as this returns.

        Args:
            entries: The candidate entries.

        Returns:
            The number of entries actually persisted.
        """
        ...

    async def count(self) -> int:
        """Returns the number of persisted entries."""
        ...

    async def list_entries(self, kind: Optional[VocabType] = None) -> List[VocabularyEntry]:
        """Returns the persisted entries in insertion order, optionally of one kind."""
        ...

    async def health_check(self) -> bool:
        """Returns True if the underlying storage is accessible."""
        ...
