# vocab_builder\shared\resilience.py
import structlog
from tenacity import (
    RetryCallState,
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)
from vocab_builder.shared.config import settings

logger = structlog.get_logger()

# Errors worth a second attempt: the request never reached the model or timed out.
TRANSIENT_ERRORS = (IOError, TimeoutError, ConnectionError)

def _log_retry(retry_state: RetryCallState) -> None:
    exc = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(
        "remote_call_retrying",
        call=getattr(retry_state.fn, "__qualname__", str(retry_state.fn)),
        attempt=retry_state.attempt_number,
        error=str(exc),
    )

def retry_transient_errors(max_attempts: int = None):
    """
    Decorator for retries on remote calls (e.g., the Gemini API).
    Works on both plain functions and coroutines.

    Strategy:
    - Wait: Exponential Backoff (1s, 2s, 4s...) up to 10s.
    - Stop: After `max_attempts` (defaults to GENERATION_MAX_RETRIES).
    - Only network-level errors are retried. Quota and parsing failures are not.
    """
    attempts = max_attempts or settings.GENERATION_MAX_RETRIES
    return retry(
        stop=stop_after_attempt(attempts),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        retry=retry_if_exception_type(TRANSIENT_ERRORS),
        before_sleep=_log_retry,
        reraise=True,
    )
