# vocab_builder\shared\container.py
from dependency_injector import containers, providers

from vocab_builder.shared.config import StorageBackend, settings
from vocab_builder.adapters.credentials import SettingsCredentialStore
from vocab_builder.adapters.generation.gemini_generator import GeminiVocabularyGenerator
from vocab_builder.adapters.llm_adapter import GeminiAdapter
from vocab_builder.adapters.messaging.memory_broker import InMemoryMessageBroker
from vocab_builder.adapters.persistence.filesystem_repo import FileSystemVocabularyStore
from vocab_builder.adapters.persistence.memory_repo import InMemoryVocabularyStore

from vocab_builder.core.domain.readiness import InitializationState
from vocab_builder.core.use_cases.check_readiness import CheckReadiness
from vocab_builder.core.use_cases.collect_batches import CollectVocabularyBatches
from vocab_builder.core.use_cases.import_vocabulary import ImportVocabulary

def _backend_name(value) -> str:
    return StorageBackend(value).value

class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    This declarative container defines the assembly instructions for the
    acquisition core. A host overrides `credential_store` with its own
    (e.g. an InMemoryCredentialStore fed from the API key form).
    """

    # 1. Configuration
    # We load settings directly, but wrapping them allows overriding in tests.
    config = providers.Configuration(pydantic_settings=[settings])

    # 2. Host State
    init_state = providers.Singleton(InitializationState)

    credential_store = providers.Singleton(SettingsCredentialStore)

    # 3. Gateways (Infrastructure Adapters)

    # Event Bus (Singleton: every subscriber shares one registry)
    message_broker = providers.Singleton(InMemoryMessageBroker)

    # Persistence (Singleton: one lock guards insert-if-new)
    vocabulary_store = providers.Selector(
        providers.Callable(_backend_name, config.STORAGE_BACKEND),
        filesystem=providers.Singleton(
            FileSystemVocabularyStore,
            base_path=config.FILESYSTEM_REPO_PATH,
        ),
        memory=providers.Singleton(InMemoryVocabularyStore),
    )

    language_model = providers.Singleton(
        GeminiAdapter,
        credentials=credential_store,
        model_name=config.AI_MODEL_NAME,
        timeout=config.GENERATION_TIMEOUT_SEC,
    )

    generation_client = providers.Singleton(
        GeminiVocabularyGenerator,
        llm=language_model,
        store=vocabulary_store,
        items_per_batch=config.ITEMS_PER_BATCH,
    )

    # 4. Use Cases (Application Logic)

    check_readiness_use_case = providers.Factory(
        CheckReadiness,
        store=vocabulary_store,
        credentials=credential_store,
        init_state=init_state,
    )

    import_vocabulary_use_case = providers.Factory(
        ImportVocabulary,
        store=vocabulary_store,
        broker=message_broker,
        readiness=check_readiness_use_case,
    )

    # Singleton: the active-run flag must be shared by every caller
    collect_batches_use_case = providers.Singleton(
        CollectVocabularyBatches,
        generator=generation_client,
        broker=message_broker,
        readiness=check_readiness_use_case,
        items_per_batch=config.ITEMS_PER_BATCH,
        default_batch_count=config.DEFAULT_BATCH_COUNT,
    )

# Instantiate the container for global access (e.g. by the host UI)
container = Container()
