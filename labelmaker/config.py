"""Application configuration using pydantic-settings."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CONFIG_DIR = Path.home() / ".config" / "labelmaker"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Attributes:
        app_name: Window title and CLI banner.
        config_dir: Directory holding the preference files.
        preference_group: Name of the preference group (one JSON file).
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
    """

    model_config = SettingsConfigDict(
        env_prefix="LABELMAKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "LabelMaker"
    config_dir: Path = DEFAULT_CONFIG_DIR
    preference_group: str = "default"
    log_level: str = "INFO"

    @property
    def preferences_file(self) -> Path:
        """Path of the JSON file backing the preference group."""
        return self.config_dir / f"{self.preference_group}.json"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Application settings.
    """
    return Settings()
