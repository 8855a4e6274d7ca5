# vocab_builder/adapters/persistence/filesystem_repo.py
import asyncio
import json
import os
import aiofiles
import aiofiles.os
from pathlib import Path
from typing import Optional, List, Dict, Any, Sequence
import structlog

from vocab_builder.core.domain.models import VocabularyEntry, VocabType
from vocab_builder.core.domain.exceptions import StoreError

logger = structlog.get_logger()

STORE_FORMAT_VERSION = 1

class FileSystemVocabularyStore:
    """
    Concrete implementation of the Vocabulary Store using a local JSON file.

    Layout: {"version": 1, "entries": {identity: entry, ...}}. The document
    is loaded once and every insert writes it back before returning.
    """

    def __init__(self, base_path: str, filename: str = "vocabulary.json"):
        # Structure: <base_path>/data/vocabulary/vocabulary.json
        self.store_path = Path(base_path) / "data" / "vocabulary" / filename
        self.store_path.parent.mkdir(parents=True, exist_ok=True)
        self._entries: Optional[Dict[str, Dict[str, Any]]] = None
        # Serializes load/check/write so overlapping inserts cannot both add a term.
        self._lock = asyncio.Lock()

    async def _load_file(self) -> Dict[str, Dict[str, Any]]:
        """Reads the document once; later calls use the cached copy."""
        if self._entries is not None:
            return self._entries

        if not self.store_path.exists():
            self._entries = {}
            return self._entries

        try:
            async with aiofiles.open(self.store_path, mode='r', encoding='utf-8') as f:
                content = await f.read()
            data = json.loads(content) if content.strip() else {}
        except (OSError, ValueError) as e:
            logger.error("store_read_failed", path=str(self.store_path), error=str(e))
            raise StoreError(f"Could not read vocabulary store at {self.store_path}: {e}")

        entries = data.get("entries", {}) if isinstance(data, dict) else None
        if not isinstance(entries, dict):
            raise StoreError(f"Vocabulary store at {self.store_path} has an unexpected layout.")

        self._entries = entries
        logger.info("store_loaded", path=str(self.store_path), entries=len(entries))
        return self._entries

    async def _save_file(self, entries: Dict[str, Dict[str, Any]]) -> None:
        """Writes to a sibling temp file and swaps it in."""
        tmp_path = self.store_path.with_suffix(self.store_path.suffix + ".tmp")
        document = {"version": STORE_FORMAT_VERSION, "entries": entries}

        try:
            async with aiofiles.open(tmp_path, mode='w', encoding='utf-8') as f:
                await f.write(json.dumps(document, indent=2, ensure_ascii=False))
            await aiofiles.os.replace(tmp_path, self.store_path)
        except OSError as e:
            logger.error("store_write_failed", path=str(self.store_path), error=str(e))
            raise StoreError(f"Could not save vocabulary store at {self.store_path}: {e}")

    # --- Interface Implementation ---

    async def insert_if_new(self, entries: Sequence[VocabularyEntry]) -> int:
        async with self._lock:
            stored = await self._load_file()
            pending = dict(stored)

            added = 0
            for entry in entries:
                key = entry.identity
                if key in pending:
                    continue
                pending[key] = entry.model_dump(mode="json")
                added += 1

            if added:
                await self._save_file(pending)
                # Only publish the new state once it is on disk
                self._entries = pending

        logger.info("vocabulary_inserted", backend="filesystem", received=len(entries), added=added)
        return added

    async def count(self) -> int:
        async with self._lock:
            return len(await self._load_file())

    async def list_entries(self, kind: Optional[VocabType] = None) -> List[VocabularyEntry]:
        async with self._lock:
            stored = await self._load_file()
            entries = [VocabularyEntry(**raw) for raw in stored.values()]
        if kind is not None:
            entries = [e for e in entries if e.kind == kind]
        return entries

    async def health_check(self) -> bool:
        """Checks if the data directory is accessible."""
        directory = self.store_path.parent
        return directory.exists() and os.access(directory, os.R_OK | os.W_OK)
