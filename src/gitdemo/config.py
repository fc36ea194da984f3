"""Configuration management for gitdemo."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging_utils import configure_logging


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="GITDEMO_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging Configuration
    log_level: str = Field(default="WARNING", description="Log level")
    log_profile: Literal["default", "repl"] = Field(default="default", description="Log output profile")

    # Interactive Configuration
    prompt: str = Field(default="$ ", description="Prompt shown by the REPL")
    json_output: bool = Field(default=False, description="Print parse results as JSON")


def get_settings(**overrides: object) -> Settings:
    """Get application settings and configure logging from them."""
    settings = Settings(**overrides)  # type: ignore[arg-type]

    configure_logging(level=settings.log_level, profile=settings.log_profile)

    return settings
