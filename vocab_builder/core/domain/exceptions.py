# vocab_builder/core/domain/exceptions.py
class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Validation Errors ---

class ValidationError(DomainError):
    """
    Raised when an import document is malformed or does not carry a
    `vocabulary` list. The store is never touched when this is raised.
    """
    def __init__(self, reason: str, source: str = None):
        self.reason = reason
        self.source = source
        if source:
            super().__init__(f"Invalid import ({source}): {reason}")
        else:
            super().__init__(reason)

# --- Remote Capability Errors ---

class GenerationError(DomainError):
    """
    Raised when the AI generation service fails (quota, network, invalid
    credential, malformed response). The message is shown to the user as-is.
    """

# --- Process/State Errors ---

class NotReadyError(DomainError):
    """Raised when an operation is attempted while a readiness precondition is false."""
    def __init__(self, capability: str, reason: str):
        self.capability = capability
        self.reason = reason
        super().__init__(f"{capability} is not available: {reason}")

class BusyError(DomainError):
    """Raised when a collection run is requested while another one is active."""
    def __init__(self, run_id: str):
        self.run_id = run_id
        super().__init__(f"A collection run is already in progress ({run_id}).")

# --- Infrastructure Errors ---

class StoreError(DomainError):
    """Raised when the vocabulary store cannot be read or written."""
