# vocab_builder\adapters\messaging\memory_broker.py
from typing import Dict, List
import structlog

from vocab_builder.core.domain.events import SystemEvent
from vocab_builder.core.ports.message_broker import Handler

logger = structlog.get_logger()

# Subscribing to this pseudo-type receives every event.
ALL_EVENTS = "*"

class InMemoryMessageBroker:
    """
    In-process implementation of the Message Broker.

    Handlers are awaited one after another inside `publish`, so a host sees
    status events in exactly the order the use case emitted them.
    """

    def __init__(self, history_size: int = 200):
        # Registry of local handlers: { 'event.type': [handler_func, ...] }
        self._handlers: Dict[str, List[Handler]] = {}
        self._history: List[SystemEvent] = []
        self._history_size = history_size

    async def publish(self, event: SystemEvent) -> None:
        self._history.append(event)
        if len(self._history) > self._history_size:
            del self._history[0]

        handlers = self._handlers.get(event.type, []) + self._handlers.get(ALL_EVENTS, [])
        logger.debug("event_published", type=event.type, id=event.id, handlers=len(handlers))

        for handler in handlers:
            try:
                await handler(event)
            except Exception as handler_err:
                # A broken subscriber must not abort the use case that published
                logger.error("event_handler_failed", event_type=event.type, error=str(handler_err), exc_info=True)

    async def subscribe(self, event_type: str, handler: Handler) -> None:
        self._handlers.setdefault(event_type, []).append(handler)
        logger.info("handler_registered", event_type=event_type)

    async def unsubscribe(self, event_type: str, handler: Handler) -> None:
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def recent_events(self, event_type: str = None) -> List[SystemEvent]:
        """Events published so far (bounded), oldest first."""
        if event_type is None:
            return list(self._history)
        return [e for e in self._history if e.type == event_type]

    async def health_check(self) -> bool:
        return True
