# vocab_builder/core/domain/events.py
from enum import Enum
from pydantic import BaseModel, Field, ConfigDict
from typing import Dict, Any, Optional
from datetime import datetime, timezone
import uuid

class EventType(str, Enum):
    """
    Registry of all events the core publishes.
    Hosts subscribe to these to narrate progress and refresh counts.
    """
    # Collection Run Events
    COLLECTION_STARTED = "collection.started"
    BATCH_STARTED = "collection.batch.started"
    BATCH_COMPLETED = "collection.batch.completed"
    BATCH_FAILED = "collection.batch.failed"
    COLLECTION_FINISHED = "collection.finished"
    COLLECTION_STOPPED = "collection.stopped"

    # Data Events
    STORE_CHANGED = "vocabulary.store.changed"

class SystemEvent(BaseModel):
    """
    The standard envelope for all messages on the Event Bus.

    Attributes:
        id: Unique UUID.
        type: The classification of the event.
        payload: The actual data (e.g., a BatchProgressPayload dump).
        trace_id: OpenTelemetry Trace ID, when a span is recording.
        timestamp: When the event occurred (UTC).
    """
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    type: EventType
    payload: Dict[str, Any]
    trace_id: Optional[str] = None
    timestamp: float = Field(default_factory=lambda: datetime.now(timezone.utc).timestamp())

    model_config = ConfigDict(use_enum_values=True)

# --- Specific Payloads ---

class BatchProgressPayload(BaseModel):
    """One status step of a collection run, in publication order."""
    run_id: str
    batch_index: int
    total_batches: int
    added_this_batch: Optional[int] = None
    running_total: int
    message: str
    error: Optional[str] = None

class StoreChangedPayload(BaseModel):
    kind: str
    added_count: int
    total_count: int
    source: str = "import"
