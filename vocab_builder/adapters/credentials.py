# vocab_builder/adapters/credentials.py
from typing import Optional
import structlog

from vocab_builder.shared.config import settings

logger = structlog.get_logger()

# Value shipped in sample .env files; never a real key.
PLACEHOLDER_KEY = "your_gemini_api_key_here"

def _usable(key: Optional[str]) -> Optional[str]:
    if not key:
        return None
    key = key.strip()
    if not key or key == PLACEHOLDER_KEY:
        return None
    return key

class InMemoryCredentialStore:
    """
    Holds the key the host resolved from its own storage (e.g. what the user
    typed into the API key form). Supports 'Bring Your Own Key'.
    """

    def __init__(self, api_key: Optional[str] = None):
        self._api_key = _usable(api_key)

    def set_api_key(self, api_key: str) -> None:
        key = _usable(api_key)
        if not key:
            raise ValueError("API Key cannot be empty.")
        self._api_key = key
        logger.info("credential_set", source="user")

    def clear(self) -> None:
        self._api_key = None
        logger.info("credential_cleared")

    def get_api_key(self) -> Optional[str]:
        return self._api_key

    def is_set(self) -> bool:
        return self._api_key is not None

class SettingsCredentialStore:
    """
    Server-side fallback key (GOOGLE_API_KEY), read from the settings
    object whenever the core asks for it.
    """

    def __init__(self, config=None):
        self._config = config or settings

    def get_api_key(self) -> Optional[str]:
        return _usable(self._config.GOOGLE_API_KEY)

    def is_set(self) -> bool:
        return self.get_api_key() is not None
