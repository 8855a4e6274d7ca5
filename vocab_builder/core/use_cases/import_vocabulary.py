# vocab_builder/core/use_cases/import_vocabulary.py
import json
import aiofiles
import structlog
from pathlib import Path
from typing import Any, List, Optional, Union
from pydantic import ValidationError as PydanticValidationError

from vocab_builder.core.domain.models import ImportResult, VocabType, VocabularyEntry
from vocab_builder.core.domain.events import EventType, StoreChangedPayload, SystemEvent
from vocab_builder.core.domain.exceptions import DomainError, StoreError, ValidationError
from vocab_builder.core.ports.message_broker import IMessageBroker
from vocab_builder.core.ports.vocabulary_store import IVocabularyStore
from vocab_builder.core.use_cases.check_readiness import CheckReadiness
from vocab_builder.shared.observability import current_trace_id, get_tracer, use_case_span

logger = structlog.get_logger()
tracer = get_tracer(__name__)

class ImportVocabulary:
    """
    Use Case: Imports an externally authored JSON document into the store.

    Responsibilities:
    1. Refuses to run while the host is still initializing.
    2. Validates the whole document before the store is touched.
    3. Stamps every entry with the kind chosen by the user.
    4. Delegates deduplication to the store and reports added vs. total.
    5. Publishes a store-changed event so the host refreshes its counts.
    """

    def __init__(self, store: IVocabularyStore, broker: IMessageBroker, readiness: CheckReadiness):
        self.store = store
        self.broker = broker
        self.readiness = readiness

    async def execute(self, raw_text: Union[str, bytes], kind: VocabType, source: Optional[str] = None) -> ImportResult:
        """
        Imports one document.

        Args:
            raw_text: The JSON text, expected as {"vocabulary": [...]}.
            kind: The record kind every imported entry will carry.
            source: Optional label (file name) used in error messages.

        Returns:
            ImportResult with the number of new entries and the input size.
        """
        kind = self._coerce_kind(kind, source)
        return await self._import(raw_text, kind, source, check_ready=True)

    async def _import(self, raw_text: Any, kind: VocabType, source: Optional[str], check_ready: bool) -> ImportResult:
        with use_case_span(tracer, "import_vocabulary", vocab_kind=kind.value, source=source) as span:
            logger.info("import_started", kind=kind.value, source=source)

            if check_ready:
                await self._ensure_ready()

            # 1. Validation (whole document, no partial imports)
            entries = self._parse(raw_text, kind, source)
            span.set_attribute("app.entries_total", len(entries))

            # 2. Persistence (dedup is the store's job)
            try:
                added_count = await self.store.insert_if_new(entries)
            except DomainError:
                raise
            except Exception as e:
                logger.error("import_store_failed", kind=kind.value, error=str(e), exc_info=True)
                raise StoreError(f"Could not save imported vocabulary: {e}")

            result = ImportResult(kind=kind, added_count=added_count, total_count=len(entries))

            # 3. Notify the host, even when nothing new was added
            await self.broker.publish(SystemEvent(
                type=EventType.STORE_CHANGED,
                payload=StoreChangedPayload(
                    kind=kind.value,
                    added_count=result.added_count,
                    total_count=result.total_count,
                ).model_dump(),
                trace_id=current_trace_id(),
            ))

            span.set_attribute("app.entries_added", added_count)
            logger.info(
                "import_completed",
                kind=kind.value,
                added=result.added_count,
                duplicates=result.duplicate_count,
            )
            return result

    async def execute_file(self, path: Union[str, Path], kind: VocabType) -> ImportResult:
        """Reads a `.json` file and imports it."""
        path = Path(path)
        kind = self._coerce_kind(kind, path.name)
        await self._ensure_ready()

        try:
            async with aiofiles.open(path, mode="r", encoding="utf-8") as f:
                raw_text = await f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error("import_file_unreadable", path=str(path), error=str(e))
            raise ValidationError(f"file could not be read ({e})", source=self._label(path.name, kind))

        # Readiness was checked before the read
        return await self._import(raw_text, kind, path.name, check_ready=False)

    async def _ensure_ready(self) -> None:
        readiness = await self.readiness.execute()
        readiness.require_not_initializing("Import")

    def _parse(self, raw_text: Any, kind: VocabType, source: Optional[str]) -> List[VocabularyEntry]:
        label = self._label(source, kind)

        try:
            document = json.loads(raw_text)
        except (TypeError, ValueError, RecursionError):
            # RecursionError: nesting deeper than the decoder can follow
            raise ValidationError("malformed input", source=label)

        vocabulary = document.get("vocabulary") if isinstance(document, dict) else None
        if not isinstance(vocabulary, list):
            raise ValidationError("missing or malformed vocabulary field", source=label)

        entries = []
        for index, raw in enumerate(vocabulary):
            if not isinstance(raw, dict):
                raise ValidationError(f"vocabulary[{index}] is not an object", source=label)
            try:
                entries.append(VocabularyEntry.from_raw(raw, kind))
            except PydanticValidationError as e:
                raise ValidationError(f"vocabulary[{index}]: {e.errors()[0]['msg']}", source=label)
            except ValueError as e:
                raise ValidationError(f"vocabulary[{index}]: {e}", source=label)
        return entries

    def _coerce_kind(self, kind: Any, source: Optional[str]) -> VocabType:
        try:
            return VocabType(kind)
        except ValueError:
            raise ValidationError(f"unknown vocabulary kind '{kind}'", source=source)

    @staticmethod
    def _label(source: Optional[str], kind: VocabType) -> str:
        if source:
            return f"{source}, {kind.value} import"
        return f"{kind.value} import"
