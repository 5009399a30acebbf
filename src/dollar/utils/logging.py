"""Structured logging for the library and the applications that embed it.

Key Responsibilities:
    - Hand out structlog loggers for the library modules
    - Render structlog events and standard library records through one JSON
      pipeline with sensitive field scrubbing
    - Bind correlation identifiers to the current context

Collaborators:
    - Upstream: Library modules call ``get_logger``; applications call
      ``configure_logging`` once at startup
    - Downstream: ``structlog.stdlib.ProcessorFormatter`` on the root logger

Side Effects:
    - ``configure_logging`` replaces the root logger handlers and the global
      structlog configuration

Thread Safety:
    - Correlation ID helpers rely on ``contextvars`` and are safe for async use
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING, Any, Callable

import structlog

if TYPE_CHECKING:
    from dollar.config.settings import LoggingSettings

_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)

SCRUBBED = "***"

# ==============================================================================
# PROCESSORS
# ==============================================================================


def _scrub_processor(
    scrub_fields: Iterable[str] | None,
) -> Callable[[Any, str, dict[str, Any]], dict[str, Any]]:
    """Build a processor masking ``scrub_fields`` and adding the correlation ID."""
    lower_fields = {field.lower() for field in scrub_fields or ()}

    def processor(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        correlation_id = _correlation_id.get()
        if correlation_id:
            event_dict.setdefault("correlation_id", correlation_id)
        for key in event_dict:
            if key.lower() in lower_fields:
                event_dict[key] = SCRUBBED
        return event_dict

    return processor


def _shared_processors(scrub_fields: Iterable[str] | None) -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        _scrub_processor(scrub_fields),
        structlog.processors.format_exc_info,
    ]


def _resolve_level(level: int | str | None) -> int:
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        return resolved if isinstance(resolved, int) else logging.INFO
    if isinstance(level, int):
        return level
    return logging.INFO


# ==============================================================================
# CONFIGURATION
# ==============================================================================


def configure_logging(
    level: int | str | None = None,
    *,
    settings: LoggingSettings | None = None,
) -> None:
    """Route every log line to stdout as one JSON object.

    Args:
        level: Logging level or level name; ignored when ``settings`` is given.
        settings: Logging settings providing the level and the scrubbed fields.

    Note:
        The library never calls this; it belongs to application startup.
    """
    scrub_fields: Iterable[str] | None = None
    if settings is not None:
        level = settings.level
        scrub_fields = settings.scrub_fields
    level_value = _resolve_level(level)

    shared = _shared_processors(scrub_fields)
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[structlog.stdlib.ExtraAdder(), *shared],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.JSONRenderer(sort_keys=True, default=str),
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    preserved: list[logging.Handler] = []
    for existing in root_logger.handlers:
        if type(existing).__module__.startswith("_pytest."):
            existing.setFormatter(formatter)
            preserved.append(existing)

    logging.basicConfig(level=level_value, handlers=[*preserved, handler], force=True)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return the structlog logger the library modules emit their events on."""
    return structlog.stdlib.get_logger(name)


# ==============================================================================
# CORRELATION ID HELPERS
# ==============================================================================


def bind_correlation_id(value: str) -> Token[str | None]:
    """Bind a correlation identifier to the current execution context.

    Returns:
        Context variable token that restores the previous value on reset.
    """
    token = _correlation_id.set(value)
    structlog.contextvars.bind_contextvars(correlation_id=value)
    return token


def reset_correlation_id(token: Token[str | None] | None) -> None:
    if token is not None:
        _correlation_id.reset(token)
    structlog.contextvars.unbind_contextvars("correlation_id")


def get_correlation_id() -> str | None:
    return _correlation_id.get()
