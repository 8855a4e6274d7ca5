# vocab_builder\core\use_cases\check_readiness.py
import structlog

from vocab_builder.core.domain.readiness import InitializationState, Readiness, evaluate_readiness
from vocab_builder.core.ports.credential_store import ICredentialStore
from vocab_builder.core.ports.vocabulary_store import IVocabularyStore

logger = structlog.get_logger()

class CheckReadiness:
    """
    Use Case: Reports which entry points the host may enable.

    The host calls it after every relevant state change; the import and
    collection use cases call it again before doing any work.
    """

    def __init__(self, store: IVocabularyStore, credentials: ICredentialStore, init_state: InitializationState):
        self.store = store
        self.credentials = credentials
        self.init_state = init_state

    async def execute(self) -> Readiness:
        persisted_count = await self.store.count()
        readiness = evaluate_readiness(
            persisted_count=persisted_count,
            credential_is_set=self.credentials.is_set(),
            is_initializing=self.init_state.is_initializing,
        )
        logger.debug(
            "readiness_evaluated",
            persisted_count=persisted_count,
            db_ready=readiness.is_db_ready,
            ai_ready=readiness.is_ai_ready,
        )
        return readiness
