# tests\conftest.py
import json
import pytest
from unittest.mock import AsyncMock, MagicMock

from vocab_builder.shared.container import Container
from vocab_builder.adapters.credentials import InMemoryCredentialStore
from vocab_builder.adapters.messaging.memory_broker import ALL_EVENTS, InMemoryMessageBroker
from vocab_builder.adapters.persistence.memory_repo import InMemoryVocabularyStore
from vocab_builder.core.domain.models import GenerationFilter, VocabTypeFilter
from vocab_builder.core.domain.readiness import InitializationState
from vocab_builder.core.ports.generation_client import IGenerationClient

@pytest.fixture(scope="function")
def memory_store():
    """Returns an empty in-memory Vocabulary Store."""
    return InMemoryVocabularyStore()

@pytest.fixture(scope="function")
def broker():
    return InMemoryMessageBroker()

@pytest.fixture(scope="function")
def credentials():
    """A credential store that already holds a key."""
    return InMemoryCredentialStore("test-api-key")

@pytest.fixture(scope="function")
def init_state():
    return InitializationState()

@pytest.fixture(scope="function")
def mock_generator():
    """Returns a mock Generation Client that adds 5 entries per batch."""
    generator = MagicMock(spec=IGenerationClient)
    # Async methods must be mocked with AsyncMock
    generator.generate = AsyncMock(return_value=5)
    return generator

@pytest.fixture(scope="function")
def container(memory_store, broker, credentials, init_state, mock_generator):
    """
    Sets up the Dependency Injection Container for testing.
    It overrides real infrastructure providers with in-memory adapters and
    a mocked generation client, so no test touches Gemini or the disk.
    """
    container = Container()

    container.vocabulary_store.override(memory_store)
    container.message_broker.override(broker)
    container.credential_store.override(credentials)
    container.init_state.override(init_state)
    container.generation_client.override(mock_generator)

    yield container

    container.unwire()
    container.reset_override()

@pytest.fixture
def captured_events(broker):
    """
    Records every published event. Subscription happens lazily on first
    use because `subscribe` is a coroutine.
    """
    class Recorder:
        def __init__(self):
            self.events = []
            self._subscribed = False

        async def attach(self):
            if not self._subscribed:
                await broker.subscribe(ALL_EVENTS, self._handle)
                self._subscribed = True
            return self

        async def _handle(self, event):
            self.events.append(event)

        def types(self):
            return [e.type for e in self.events]

    return Recorder()

@pytest.fixture
def word_filter():
    return GenerationFilter(vocab_type=VocabTypeFilter.WORD)

@pytest.fixture
def sample_document():
    """A valid import document with two words."""
    return json.dumps({
        "vocabulary": [
            {"term": "invoice", "definition": "a bill for goods or services", "level": "Beginner"},
            {"term": "negotiate", "definition": "to discuss to reach an agreement", "example": "We negotiated the price."},
        ]
    })
