# Settings management (reads env vars / .env)
# movies_api/core/config.py

import json
import logging
from functools import lru_cache
from typing import Annotated, List, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

logger = logging.getLogger(__name__)

class Settings(BaseSettings):
    """
    Application configuration settings loaded from environment variables or .env file.
    """
    # --- Project Info ---
    PROJECT_NAME: str = Field("Movies Query API", validation_alias="PROJECT_NAME")
    API_V1_STR: str = Field("/api", validation_alias="API_V1_STR") # Base path for API endpoints
    VERSION: str = Field("1.0.0", validation_alias="APP_VERSION")

    # --- Logging ---
    LOG_LEVEL: str = Field("INFO", validation_alias="LOG_LEVEL")

    # --- Database (SQLite, one file per table) ---
    MOVIES_DB_PATH: str = Field("db/movies.db", validation_alias="MOVIES_DB_PATH")
    RATINGS_DB_PATH: str = Field("db/ratings.db", validation_alias="RATINGS_DB_PATH")

    # --- Pagination ---
    DEFAULT_PAGE_SIZE: int = Field(
        default=50,
        validation_alias="DEFAULT_PAGE_SIZE",
        description="Page size used when a request does not ask for one"
    )
    MAX_PAGE_SIZE: int = Field(
        default=100,
        validation_alias="MAX_PAGE_SIZE",
        description="Largest page size the HTTP layer accepts"
    )

    # --- CORS ---
    # Expects a comma-separated string in env var like "http://localhost:3000,https://*.example.com"
    # or a JSON list like '["http://localhost:3000"]'
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = Field(
        default=["*"],
        validation_alias="BACKEND_CORS_ORIGINS"
    )

    @field_validator("BACKEND_CORS_ORIGINS", mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, str):
            # JSON list form, e.g. '["http://localhost:3000"]'
            try:
                return json.loads(v)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid BACKEND_CORS_ORIGINS JSON list: {v}") from e
        elif isinstance(v, list):
            return v
        raise ValueError(f"Invalid BACKEND_CORS_ORIGINS format: {v}")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )

@lru_cache()
def get_settings() -> Settings:
    """Returns the application settings instance."""
    logger.info("Attempting to load application settings...")
    try:
        settings_instance = Settings()
        logger.info(f"Settings loaded successfully for Project: {settings_instance.PROJECT_NAME}")
        logger.info(f"Log Level: {settings_instance.LOG_LEVEL}")
        logger.info(f"Movies DB: {settings_instance.MOVIES_DB_PATH}")
        logger.info(f"Ratings DB: {settings_instance.RATINGS_DB_PATH}")
        return settings_instance
    except Exception as e:
        logger.critical(f"CRITICAL ERROR: Failed to load application settings: {e}", exc_info=True)
        raise RuntimeError(f"Could not load settings: {e}")


# Create a single settings instance to be imported by other modules
settings: Settings = get_settings()
