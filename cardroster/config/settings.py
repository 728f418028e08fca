import logging
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class AppSettings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    # Object storage (Supabase Storage bucket holding config and cards)
    supabase_url: Optional[str] = Field(
        None, description="URL for the Supabase project hosting the bucket."
    )
    supabase_key: Optional[str] = Field(
        None, description="Key for the Supabase project."
    )
    storage_bucket: str = Field(
        "system-cards-01", description="Bucket holding tournament config and cards."
    )
    tournaments_config_key: str = Field(
        "config/tournaments.json",
        description="Object key of the tournaments configuration file.",
    )

    # Roster sources
    default_tournament: str = Field(
        "26prague", description="Tournament code used when none is requested."
    )
    request_timeout: float = Field(
        30.0, gt=0, description="Timeout in seconds for registration site requests."
    )
    user_agent: str = Field(
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124.0 Safari/537.36",
        description="User-Agent header sent to registration sites.",
    )
    snapshot_file: str = Field(
        "roster_snapshot.json", description="Where main.py writes fetched rosters."
    )

    # Logging Configuration
    log_level: str = Field(
        "INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."
    )

    # Pydantic Settings Configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @property
    def storage_configured(self) -> bool:
        return bool(self.supabase_url and self.supabase_key)


def load_settings() -> AppSettings:
    """Loads and validates application settings."""
    try:
        settings = AppSettings()
        log_level_upper = settings.log_level.upper()
        # Validate log_level even if loaded from .env
        if log_level_upper not in VALID_LOG_LEVELS:
            logging.warning(
                f"Invalid LOG_LEVEL '{settings.log_level}' found in .env or default. Using INFO."
            )
            settings.log_level = "INFO"
        else:
            settings.log_level = log_level_upper
        return settings
    except Exception as e:
        logging.exception(f"Error loading application settings: {e}")
        raise SystemExit("Failed to load application settings. Exiting.")


settings: AppSettings = load_settings()
