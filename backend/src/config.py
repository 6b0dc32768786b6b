"""Application configuration via environment variables.

Provides type-safe settings loading using pydantic-settings.
Environment variables can be loaded from a .env file.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Order validation settings loaded from environment variables.

    Environment Variables:
        DELIVERY_HORIZON_DAYS: Latest acceptable delivery end, in days from
            validation time (default 14)
        EMIT_AGGREGATE_VERDICT: If True, the final orderValidation event
            carries the real verdict instead of always valid=True
        LOG_LEVEL: Logging level (default INFO)
        LOG_JSON: Emit JSON log lines (default True)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Validation
    DELIVERY_HORIZON_DAYS: int = 14
    EMIT_AGGREGATE_VERDICT: bool = False

    # Application
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache for singleton behavior.
    Call get_settings.cache_clear() to reload settings.
    """
    return Settings()
