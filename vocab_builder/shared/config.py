# vocab_builder\shared\config.py
from enum import Enum
from typing import Literal, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"

class StorageBackend(str, Enum):
    FILESYSTEM = "filesystem"
    MEMORY = "memory"

class Settings(BaseSettings):
    """
    Settings of the acquisition core, read from the environment and `.env`.
    Hosts may also build their own instance and hand it to the container.
    """

    APP_NAME: str = "vocab-builder"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # --- Gemini ---
    # Fallback only: hosts normally supply the user's own key at runtime.
    GOOGLE_API_KEY: Optional[str] = None
    AI_MODEL_NAME: str = "gemini-1.5-flash"
    GENERATION_MAX_RETRIES: int = Field(3, ge=1)
    GENERATION_TIMEOUT_SEC: int = Field(120, gt=0)

    # --- Batch collection ---
    ITEMS_PER_BATCH: int = Field(75, ge=1)
    DEFAULT_BATCH_COUNT: int = Field(20, ge=1)

    # --- Vocabulary store ---
    STORAGE_BACKEND: StorageBackend = StorageBackend.FILESYSTEM
    # Root under which data/vocabulary/vocabulary.json is kept
    FILESYSTEM_REPO_PATH: str = "."

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
