# vocab_builder/core/ports/credential_store.py
from typing import Protocol, Optional

class ICredentialStore(Protocol):
    """
    Port for the user's AI credential.
    The core only reads it, at call time; storing it is the host's business.
    """

    def get_api_key(self) -> Optional[str]:
        """Returns the current key, or None when unset."""
        ...

    def is_set(self) -> bool:
        ...
