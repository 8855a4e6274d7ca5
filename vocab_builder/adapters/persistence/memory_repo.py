# vocab_builder/adapters/persistence/memory_repo.py
import asyncio
from typing import Dict, List, Optional, Sequence
import structlog

from vocab_builder.core.domain.models import VocabularyEntry, VocabType

logger = structlog.get_logger()

class InMemoryVocabularyStore:
    """
    Process-local implementation of the Vocabulary Store.
    Used for STORAGE_BACKEND=memory and in tests.
    """

    def __init__(self, entries: Optional[Sequence[VocabularyEntry]] = None):
        self._entries: Dict[str, VocabularyEntry] = {}
        self._lock = asyncio.Lock()
        for entry in entries or []:
            self._entries.setdefault(entry.identity, entry)

    async def insert_if_new(self, entries: Sequence[VocabularyEntry]) -> int:
        async with self._lock:
            added = 0
            for entry in entries:
                key = entry.identity
                if key in self._entries:
                    continue
                self._entries[key] = entry.model_copy(deep=True)
                added += 1

        logger.debug("vocabulary_inserted", backend="memory", received=len(entries), added=added)
        return added

    async def count(self) -> int:
        return len(self._entries)

    async def list_entries(self, kind: Optional[VocabType] = None) -> List[VocabularyEntry]:
        return [e for e in self._entries.values() if kind is None or e.kind == kind]

    async def health_check(self) -> bool:
        return True
