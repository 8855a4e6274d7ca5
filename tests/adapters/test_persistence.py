# tests\adapters\test_persistence.py
import asyncio
import json
import pytest

from vocab_builder.adapters.persistence.filesystem_repo import FileSystemVocabularyStore
from vocab_builder.adapters.persistence.memory_repo import InMemoryVocabularyStore
from vocab_builder.core.domain.exceptions import StoreError
from vocab_builder.core.domain.models import VocabType, VocabularyEntry

def _entries(*terms, kind=VocabType.WORD):
    return [VocabularyEntry(term=t, kind=kind, definition=f"meaning of {t}") for t in terms]

@pytest.fixture(params=["memory", "filesystem"])
def store(request, tmp_path):
    """Runs every contract test against both backends."""
    if request.param == "memory":
        return InMemoryVocabularyStore()
    return FileSystemVocabularyStore(base_path=str(tmp_path))


@pytest.mark.asyncio
class TestVocabularyStoreContract:

    async def test_insert_counts_only_new_entries(self, store):
        assert await store.insert_if_new(_entries("invoice", "budget")) == 2
        assert await store.insert_if_new(_entries("Budget", "audit")) == 1
        assert await store.count() == 3

    async def test_reinsert_is_idempotent(self, store):
        batch = _entries("invoice", "budget")

        await store.insert_if_new(batch)
        assert await store.insert_if_new(batch) == 0
        assert await store.count() == 2

    async def test_duplicates_within_one_batch(self, store):
        added = await store.insert_if_new(_entries("merger", "MERGER", " merger "))

        assert added == 1
        assert await store.count() == 1

    async def test_first_occurrence_wins(self, store):
        await store.insert_if_new([VocabularyEntry(term="lease", definition="first")])
        await store.insert_if_new([VocabularyEntry(term="lease", definition="second")])

        stored = await store.list_entries()
        assert stored[0].payload["definition"] == "first"

    async def test_empty_batch(self, store):
        assert await store.insert_if_new([]) == 0
        assert await store.count() == 0

    async def test_list_by_kind(self, store):
        await store.insert_if_new(_entries("invoice"))
        await store.insert_if_new(_entries("in the red", kind=VocabType.IDIOM))

        words = await store.list_entries(VocabType.WORD)
        idioms = await store.list_entries(VocabType.IDIOM)

        assert [e.term for e in words] == ["invoice"]
        assert [e.term for e in idioms] == ["in the red"]
        assert len(await store.list_entries()) == 2

    async def test_payload_survives(self, store):
        await store.insert_if_new([VocabularyEntry(term="quota", example="We met our quota.", level="Intermediate")])

        entry = (await store.list_entries())[0]
        assert entry.payload == {"example": "We met our quota.", "level": "Intermediate"}

    async def test_concurrent_inserts_add_each_term_once(self, store):
        batches = [_entries("invoice", "budget", "audit") for _ in range(5)]

        results = await asyncio.gather(*(store.insert_if_new(b) for b in batches))

        assert sum(results) == 3
        assert await store.count() == 3

    async def test_health_check(self, store):
        assert await store.health_check() is True


@pytest.mark.asyncio
class TestFileSystemVocabularyStore:

    async def test_persists_across_instances(self, tmp_path):
        first = FileSystemVocabularyStore(base_path=str(tmp_path))
        await first.insert_if_new(_entries("invoice", "budget"))

        second = FileSystemVocabularyStore(base_path=str(tmp_path))

        assert await second.count() == 2
        assert await second.insert_if_new(_entries("invoice")) == 0

    async def test_document_layout(self, tmp_path):
        store = FileSystemVocabularyStore(base_path=str(tmp_path))
        await store.insert_if_new(_entries("invoice"))

        document = json.loads(store.store_path.read_text(encoding="utf-8"))

        assert document["version"] == 1
        assert "word:invoice" in document["entries"]
        assert not store.store_path.with_suffix(".json.tmp").exists()

    async def test_no_write_when_nothing_added(self, tmp_path):
        store = FileSystemVocabularyStore(base_path=str(tmp_path))
        await store.insert_if_new([])

        assert not store.store_path.exists()

    async def test_corrupt_file_raises_store_error(self, tmp_path):
        store = FileSystemVocabularyStore(base_path=str(tmp_path))
        store.store_path.write_text("{not json", encoding="utf-8")

        with pytest.raises(StoreError):
            await store.count()

    async def test_unexpected_layout_raises_store_error(self, tmp_path):
        store = FileSystemVocabularyStore(base_path=str(tmp_path))
        store.store_path.write_text(json.dumps({"entries": ["invoice"]}), encoding="utf-8")

        with pytest.raises(StoreError):
            await store.insert_if_new(_entries("budget"))

    async def test_empty_file_is_an_empty_store(self, tmp_path):
        store = FileSystemVocabularyStore(base_path=str(tmp_path))
        store.store_path.write_text("", encoding="utf-8")

        assert await store.count() == 0
