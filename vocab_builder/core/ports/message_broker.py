# vocab_builder\core\ports\message_broker.py
from typing import Protocol, Any, Callable, Coroutine
from vocab_builder.core.domain.events import SystemEvent

Handler = Callable[[SystemEvent], Coroutine[Any, Any, None]]

class IMessageBroker(Protocol):
    """
    Port for the event bus between the core and its host.

    Use cases publish run narration and store-changed events here; the host
    subscribes to update its status line and counters.
    """

    async def publish(self, event: SystemEvent) -> None:
        """
        Delivers the event to its subscribers before returning, so a host
        observes events in the order they were emitted.
        """
        ...

    async def subscribe(self, event_type: str, handler: Handler) -> None:
        """
        Args:
            event_type: An EventType value (e.g. 'collection.batch.completed'),
                or '*' for every event.
            handler: Coroutine function receiving the SystemEvent.
        """
        ...

    async def unsubscribe(self, event_type: str, handler: Handler) -> None:
        ...

    async def health_check(self) -> bool:
        ...
