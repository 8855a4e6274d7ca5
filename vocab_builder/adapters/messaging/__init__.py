"""
Messaging Adapters.

Implementations of the Message Broker port.
"""

from .memory_broker import ALL_EVENTS, InMemoryMessageBroker

__all__ = [
    "ALL_EVENTS",
    "InMemoryMessageBroker",
]
