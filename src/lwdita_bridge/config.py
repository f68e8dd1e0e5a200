"""Configuration management for lwdita-bridge."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Tree vocabulary
    source_root: str = Field(
        default="document",
        alias="LWDITA_SOURCE_ROOT",
    )
    editor_root: str = Field(
        default="doc",
        alias="LWDITA_EDITOR_ROOT",
    )
    # Inline formatting wrappers, read as a JSON list from the environment
    mark_nodes: list[str] = Field(
        default=["u", "s", "b", "sup", "sub"],
        alias="LWDITA_MARK_NODES",
    )

    # Output settings
    json_indent: int = Field(
        default=2,
        alias="LWDITA_JSON_INDENT",
    )
    log_level: str = Field(
        default="WARNING",
        alias="LWDITA_LOG_LEVEL",
    )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
