import google.generativeai as genai
from google.api_core import exceptions as google_exceptions
from typing import Optional
import structlog

from vocab_builder.core.domain.exceptions import GenerationError
from vocab_builder.core.ports.credential_store import ICredentialStore
from vocab_builder.shared.config import settings
from vocab_builder.shared.resilience import retry_transient_errors

logger = structlog.get_logger()

class GeminiAdapter:
    """
    Driven Adapter for Google Gemini LLM.
    Supports 'Bring Your Own Key' (BYOK): the key is read from the credential
    store on every call, so setting or clearing it takes effect immediately.
    """
    def __init__(self, credentials: ICredentialStore, model_name: Optional[str] = None, timeout: Optional[int] = None):
        self.credentials = credentials
        self.model_name = model_name or settings.AI_MODEL_NAME
        self.timeout = timeout or settings.GENERATION_TIMEOUT_SEC
        self._model = None
        self._configured_key: Optional[str] = None

    def _get_model(self, api_key: str):
        # genai.configure is process-global, so only redo it when the key changes
        if self._model is None or api_key != self._configured_key:
            genai.configure(api_key=api_key)
            self._model = genai.GenerativeModel(self.model_name)
            self._configured_key = api_key
            logger.info("llm_configured", model=self.model_name)
        return self._model

    @retry_transient_errors()
    async def _send(self, model, prompt: str):
        try:
            return await model.generate_content_async(
                prompt,
                request_options={"timeout": self.timeout},
            )
        except google_exceptions.DeadlineExceeded as e:
            raise TimeoutError(f"Gemini request timed out after {self.timeout}s.") from e
        except google_exceptions.ServiceUnavailable as e:
            raise ConnectionError(f"Gemini service unavailable: {e.message}") from e

    async def generate_text(self, prompt: str) -> str:
        api_key = self.credentials.get_api_key()
        if not api_key:
            logger.warning("llm_call_skipped", reason="No API Key configured")
            raise GenerationError("AI generation is disabled because no Gemini API Key is set.")

        model = self._get_model(api_key)

        try:
            response = await self._send(model, prompt)
        except google_exceptions.ResourceExhausted:
            # Quota errors belong to the user's own key
            raise GenerationError("Your Gemini API Key quota is exceeded. Please try again later.")
        except (google_exceptions.PermissionDenied, google_exceptions.Unauthenticated):
            raise GenerationError("The Gemini API Key was rejected. Please check the key and try again.")
        except google_exceptions.InvalidArgument as e:
            if "API key" in str(e):
                raise GenerationError("The Gemini API Key is not valid. Please check the key and try again.")
            raise GenerationError(f"Gemini rejected the request: {e.message}")
        except (TimeoutError, ConnectionError, OSError) as e:
            logger.error("llm_call_failed", model=self.model_name, error=str(e))
            raise GenerationError(f"Network error while contacting Gemini: {e}")
        except google_exceptions.GoogleAPIError as e:
            if "429" in str(e):
                raise GenerationError("Your Gemini API Key quota is exceeded. Please try again later.")
            logger.error("llm_call_failed", model=self.model_name, error=str(e))
            raise GenerationError(f"Gemini request failed: {e}")

        feedback = getattr(response, "prompt_feedback", None)
        if feedback is not None and getattr(feedback, "block_reason", None):
            logger.warning("llm_response_blocked", reason=str(feedback.block_reason))
            raise GenerationError(f"Gemini blocked the request ({feedback.block_reason}).")

        try:
            return response.text
        except ValueError:
            # .text raises when the candidate carries no text parts
            raise GenerationError("Gemini returned an empty response.")
