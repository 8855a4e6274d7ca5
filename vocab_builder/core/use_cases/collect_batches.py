# vocab_builder\core\use_cases\collect_batches.py
import structlog
from typing import Any, Optional

from vocab_builder.core.domain.models import (
    CollectionRun,
    GenerationFilter,
    normalize_batch_count,
    requested_item_count,
)
from vocab_builder.core.domain.events import BatchProgressPayload, EventType, SystemEvent
from vocab_builder.core.domain.exceptions import BusyError, DomainError
from vocab_builder.core.ports.generation_client import IGenerationClient
from vocab_builder.core.ports.message_broker import IMessageBroker
from vocab_builder.core.use_cases.check_readiness import CheckReadiness
from vocab_builder.shared.observability import current_trace_id, get_tracer, use_case_span

logger = structlog.get_logger()
tracer = get_tracer(__name__)

class CollectVocabularyBatches:
    """
    Use Case: Runs N sequential AI generation batches and narrates progress.

    The run is fail-fast: the first failing batch ends it, and the total
    added before the failure is kept and reported. There is no retry,
    rollback, or skip-and-continue here; retrying means the host starts a
    new run.

    Only one run may be active at a time. The container holds this use case
    as a singleton so every caller sees the same run.
    """

    def __init__(
        self,
        generator: IGenerationClient,
        broker: IMessageBroker,
        readiness: CheckReadiness,
        items_per_batch: int = 75,
        default_batch_count: int = 20,
    ):
        self.generator = generator
        self.broker = broker
        self.readiness = readiness
        self.items_per_batch = items_per_batch
        self.default_batch_count = default_batch_count
        self._run: Optional[CollectionRun] = None

    @property
    def current_run(self) -> Optional[CollectionRun]:
        """The active run, or the last one that ended."""
        return self._run

    @property
    def is_active(self) -> bool:
        return self._run is not None and self._run.is_active

    def requested_item_count(self, batch_count: Any) -> int:
        return requested_item_count(batch_count, self.items_per_batch)

    def request_stop(self) -> bool:
        """
        Asks the active run not to start another batch.
        The batch in flight always completes or fails on its own.
        """
        if not self.is_active:
            return False
        self._run.stop_requested = True
        logger.info("collection_stop_requested", run_id=self._run.run_id)
        return True

    async def execute(self, selection: GenerationFilter, batch_count: Any = None) -> CollectionRun:
        """
        Executes a collection run.

        Args:
            selection: Passed untouched to every generate call.
            batch_count: Number of batches; normalized to an integer >= 1.
                Omitted means the configured default.

        Returns:
            The finished CollectionRun. A failed run has `last_error` set.

        Raises:
            BusyError: another run is active (its state is left untouched).
            NotReadyError: no credential is set, or the host is initializing.
        """
        if self.is_active:
            logger.warning("collection_rejected_busy", run_id=self._run.run_id)
            raise BusyError(self._run.run_id)

        if batch_count is None:
            batch_count = self.default_batch_count

        # Claim the slot before the first await so a concurrent start sees it.
        run = CollectionRun(
            filter=selection,
            batch_count=normalize_batch_count(batch_count),
            is_active=True,
        )
        previous, self._run = self._run, run

        try:
            readiness = await self.readiness.execute()
            readiness.require_ai()
        except BaseException:
            self._run = previous
            raise

        with use_case_span(tracer, "collect_batches", run_id=run.run_id, batch_count=run.batch_count) as span:
            logger.info(
                "collection_started",
                run_id=run.run_id,
                batches=run.batch_count,
                level=selection.level,
                category=selection.category,
                vocab_type=selection.vocab_type.value,
            )

            try:
                await self._loop(run)
            finally:
                run.is_active = False
                span.set_attribute("app.total_added", run.total_added)

            return run

    async def _loop(self, run: CollectionRun) -> None:
        total = run.batch_count
        await self._narrate(
            run, EventType.COLLECTION_STARTED, 0,
            f"Starting {total} batches ({self.requested_item_count(total)} items requested)...",
        )

        for index in range(1, total + 1):
            if run.stop_requested:
                await self._narrate(
                    run, EventType.COLLECTION_STOPPED, run.batches_completed,
                    f"Stopped after batch {run.batches_completed}/{total}. "
                    f"Added a total of {run.total_added} new items.",
                )
                logger.info("collection_stopped", run_id=run.run_id, total_added=run.total_added)
                return

            run.current_batch_index = index
            await self._narrate(
                run, EventType.BATCH_STARTED, index,
                f"Batch {index}/{total}: Generating new items with AI...",
            )

            try:
                added = max(0, int(await self.generator.generate(run.filter)))
            except DomainError as e:
                await self._fail(run, index, e.message)
                return
            except Exception as e:
                # Unexpected infrastructure errors end the run like any generation failure
                logger.error("collection_batch_crashed", run_id=run.run_id, batch=index, exc_info=True)
                await self._fail(run, index, str(e) or e.__class__.__name__)
                return

            run.total_added += added
            run.batches_completed = index
            await self._narrate(
                run, EventType.BATCH_COMPLETED, index,
                f"Batch {index}/{total}: Success! Added {added} new items. Total so far: {run.total_added}",
                added_this_batch=added,
            )

        await self._narrate(
            run, EventType.COLLECTION_FINISHED, total,
            f"Finished! Added a total of {run.total_added} new items across {total} batches.",
        )
        logger.info("collection_finished", run_id=run.run_id, total_added=run.total_added)

    async def _fail(self, run: CollectionRun, index: int, message: str) -> None:
        run.last_error = message
        logger.warning(
            "collection_batch_failed",
            run_id=run.run_id,
            batch=index,
            error=message,
            total_added=run.total_added,
        )
        await self._narrate(
            run, EventType.BATCH_FAILED, index,
            f"Batch {index}/{run.batch_count}: Error - {message}. "
            f"Total added before error: {run.total_added}",
            error=message,
        )

    async def _narrate(
        self,
        run: CollectionRun,
        event_type: EventType,
        index: int,
        message: str,
        added_this_batch: Optional[int] = None,
        error: Optional[str] = None,
    ) -> None:
        run.status_message = message
        payload = BatchProgressPayload(
            run_id=run.run_id,
            batch_index=index,
            total_batches=run.batch_count,
            added_this_batch=added_this_batch,
            running_total=run.total_added,
            message=message,
            error=error,
        )
        await self.broker.publish(SystemEvent(
            type=event_type,
            payload=payload.model_dump(),
            trace_id=current_trace_id(),
        ))
