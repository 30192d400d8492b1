from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from functools import lru_cache

from townhall.constants import (
    OPENAI_MODEL_FAST,
    DEFAULT_DATA_DIR,
    DEFAULT_MONGO_DB_NAME,
    DEFAULT_MONGO_COLLECTION,
    StorageBackend,
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    env: str = "development"

    # Storage
    storage_backend: StorageBackend = Field(
        default=StorageBackend.AUTO,
        description="auto picks mongo when DATABASE_URL is set, file otherwise"
    )
    data_dir: str = DEFAULT_DATA_DIR

    # Database
    database_url: Optional[str] = None
    mongo_db_name: str = DEFAULT_MONGO_DB_NAME
    mongo_collection: str = DEFAULT_MONGO_COLLECTION

    # OpenAI
    openai_api_key: Optional[str] = None
    openai_model: str = OPENAI_MODEL_FAST

    # Transcripts
    transcript_languages: str = Field(
        default="en,en-US,en-GB",
        description="Preferred caption languages, in priority order"
    )

    # Logging
    log_level: str = "INFO"
    request_log_path: Optional[str] = Field(
        default=None,
        description="Append one JSON line per API request to this file"
    )

    @property
    def transcript_languages_list(self) -> list[str]:
        return [lang.strip() for lang in self.transcript_languages.split(",") if lang.strip()]

    @property
    def resolved_storage_backend(self) -> StorageBackend:
        if self.storage_backend != StorageBackend.AUTO:
            return self.storage_backend
        return StorageBackend.MONGO if self.database_url else StorageBackend.FILE


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
