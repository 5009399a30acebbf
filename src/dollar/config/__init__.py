"""Lightweight configuration package exports."""

from __future__ import annotations

from .merge import merge_config
from .settings import (
    DEFAULT_ENVIRONMENT,
    DollarSettings,
    LoggingSettings,
    get_settings,
    load_settings,
)

__all__ = [
    "DEFAULT_ENVIRONMENT",
    "DollarSettings",
    "LoggingSettings",
    "get_settings",
    "load_settings",
    "merge_config",
]
