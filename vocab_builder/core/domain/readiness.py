# vocab_builder/core/domain/readiness.py
from typing import Optional
from pydantic import BaseModel

from vocab_builder.core.domain.exceptions import NotReadyError

INITIALIZING_REASON = "Please wait for initialization to complete."
EMPTY_DB_REASON = "Add vocabulary using the AI Generator or Import JSON to enable this mode."
NO_CREDENTIAL_REASON = "Please set your Gemini API Key to use this feature."

class Readiness(BaseModel):
    """Which entry points the host may enable, and why the others are off."""
    is_db_ready: bool
    is_ai_ready: bool
    is_initializing: bool = False
    db_disabled_reason: Optional[str] = None
    ai_disabled_reason: Optional[str] = None

    def require_db(self) -> None:
        if not self.is_db_ready:
            raise NotReadyError("Vocabulary practice", self.db_disabled_reason)

    def require_ai(self) -> None:
        if not self.is_ai_ready:
            raise NotReadyError("AI generation", self.ai_disabled_reason)

    def require_not_initializing(self, capability: str = "Import") -> None:
        if self.is_initializing:
            raise NotReadyError(capability, INITIALIZING_REASON)

def evaluate_readiness(persisted_count: int, credential_is_set: bool, is_initializing: bool) -> Readiness:
    """Pure derivation of feature availability. Recompute on every state change."""
    is_db_ready = persisted_count > 0 and not is_initializing
    is_ai_ready = bool(credential_is_set) and not is_initializing

    db_reason = None
    ai_reason = None
    if not is_db_ready:
        db_reason = INITIALIZING_REASON if is_initializing else EMPTY_DB_REASON
    if not is_ai_ready:
        ai_reason = INITIALIZING_REASON if is_initializing else NO_CREDENTIAL_REASON

    return Readiness(
        is_db_ready=is_db_ready,
        is_ai_ready=is_ai_ready,
        is_initializing=is_initializing,
        db_disabled_reason=db_reason,
        ai_disabled_reason=ai_reason,
    )

class InitializationState:
    """
    Host-owned flag telling the core that startup (seeding, migrations) is
    still running. Shared by every use case through the container.
    """

    def __init__(self):
        self.is_initializing = False
        self.status = ""

    def begin(self, status: str = "Initializing...") -> None:
        self.is_initializing = True
        self.status = status

    def update(self, status: str) -> None:
        self.status = status

    def finish(self) -> None:
        self.is_initializing = False
        self.status = ""
