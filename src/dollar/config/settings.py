"""Settings for the library's own ambient behaviour."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENVIRONMENT = "development"


class LoggingSettings(BaseModel):
    """Structured logging configuration."""

    level: str = Field(default="INFO", description="Log level for application output")
    scrub_fields: Sequence[str] = Field(
        default_factory=lambda: ["password", "token", "secret", "authorization"],
        description="Fields that should be redacted in logs",
    )


class DollarSettings(BaseSettings):
    """Top-level library settings read from ``DOLLAR_*`` environment variables."""

    environment: str = Field(
        default=DEFAULT_ENVIRONMENT,
        description="Environment block selected when merging layered configs",
    )
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(env_prefix="DOLLAR_", env_nested_delimiter="__")


def load_settings(environment: str | None = None) -> DollarSettings:
    """Load settings from the environment, optionally overriding the environment name."""
    try:
        settings = DollarSettings()
    except ValidationError as err:
        raise RuntimeError(f"Invalid configuration: {err}") from err
    if environment:
        settings = settings.model_copy(update={"environment": environment})
    return settings


@lru_cache(maxsize=1)
def get_settings() -> DollarSettings:
    """Cached accessor used by applications."""
    return load_settings()
