"""Layered configuration merging.

A layered config holds an ``all`` block with shared values and one block per
environment name. Merging overlays the selected environment block onto ``all``.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from dollar.utils.logging import get_logger

from .settings import DEFAULT_ENVIRONMENT

logger = get_logger(__name__)

SHARED_BLOCK = "all"


def _deep_update(target: dict[str, Any], updates: Mapping[str, Any]) -> dict[str, Any]:
    for key, value in updates.items():
        current = target.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            target[key] = _deep_update(dict(current), value)
        else:
            target[key] = copy.deepcopy(value)
    return target


def merge_config(
    config: Mapping[str, Any] | None,
    environment: str = DEFAULT_ENVIRONMENT,
) -> dict[str, Any]:
    """Merge ``config[environment]`` over ``config["all"]``.

    Nested mappings are merged recursively; any other value in the environment
    block replaces the shared one. Neither input block is mutated.

    Args:
        config: Layered configuration, ``None`` is treated as empty.
        environment: Name of the environment block to overlay.

    Returns:
        New dictionary holding the merged configuration.
    """
    config = config or {}
    shared = config.get(SHARED_BLOCK) or {}
    overrides = config.get(environment) or {}
    if not overrides:
        logger.debug("config.merge.no_environment_block", environment=environment)
    return _deep_update(copy.deepcopy(dict(shared)), overrides)
