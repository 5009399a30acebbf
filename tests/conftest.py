from __future__ import annotations

import logging
import os

import pytest
import structlog

from dollar.config.settings import get_settings


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch):
    for name in list(os.environ):
        if name.startswith("DOLLAR_"):
            monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _reset_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)
