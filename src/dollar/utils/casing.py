"""Convert snake_case keys to camelCase across nested data.

Key Responsibilities:
    - Convert individual snake_case tokens to camelCase
    - Rebuild nested mappings and sequences with every mapping key converted

Collaborators:
    - Upstream: Serialisers preparing payloads for camelCase consumers
    - Downstream: ``values.is_primitive`` classifies leaves

Side Effects:
    - None; new containers are returned and inputs are left untouched

Thread Safety:
    - Thread-safe; purely functional helpers
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from .values import is_falsy_primitive, is_primitive

# ==============================================================================
# COMPILED PATTERNS
# ==============================================================================

_SNAKE_BOUNDARY = re.compile(r"_([a-z])")

# ==============================================================================
# PUBLIC HELPERS
# ==============================================================================


def snake_to_camel(value: Any) -> Any:
    """Convert a snake_case string to camelCase.

    Every underscore followed by a lowercase ASCII letter is removed and the
    letter uppercased; everything else is left alone, so ``"_private"`` becomes
    ``"Private"`` while ``"trailing_"`` and ``"a_B"`` are unchanged.

    Non-string values are returned unchanged.
    """
    if not value or not isinstance(value, str):
        return value
    return _SNAKE_BOUNDARY.sub(lambda match: match.group(1).upper(), value)


def camelize_keys(value: Any) -> Any:
    """Return a copy of ``value`` with every mapping key converted to camelCase.

    Args:
        value: A string, a list or tuple, a mapping, or any nesting of them.

    Returns:
        * falsy primitives (``0``, ``False``, ``""``, ``None``, ``MISSING``)
          unchanged;
        * a string converted with :func:`snake_to_camel`;
        * a new list/tuple or ``dict`` of the same shape with converted keys.
          Mapping entries holding callables are dropped;
        * ``None`` for any other type.
    """
    if is_falsy_primitive(value):
        return value
    if isinstance(value, str):
        return snake_to_camel(value)
    if isinstance(value, (list, tuple)):
        return _camelize_sequence(value)
    if isinstance(value, Mapping):
        return _camelize_mapping(value)
    return None


def _camelize_sequence(items: list[Any] | tuple[Any, ...]) -> list[Any] | tuple[Any, ...]:
    converted = []
    for item in items:
        if is_primitive(item):
            converted.append(snake_to_camel(item))
        else:
            converted.append(_camelize_container(item))
    return tuple(converted) if isinstance(items, tuple) else converted


def _camelize_mapping(mapping: Mapping[Any, Any]) -> dict[Any, Any]:
    converted: dict[Any, Any] = {}
    for key, item in mapping.items():
        if callable(item):
            continue
        if is_primitive(item):
            converted[snake_to_camel(key)] = item
        else:
            converted[snake_to_camel(key)] = _camelize_container(item)
    return converted


def _camelize_container(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return _camelize_sequence(value)
    if isinstance(value, Mapping):
        return _camelize_mapping(value)
    return None


__all__ = ["camelize_keys", "snake_to_camel"]
