"""Value classification helpers shared by the transformation utilities.

Key Responsibilities:
    - Provide the ``MISSING`` sentinel for values that are absent rather than null
    - Classify primitives and mappings keyed by numbers
    - Expose hidden instance attributes as a plain dictionary

Side Effects:
    - None; helpers never mutate their arguments

Thread Safety:
    - Thread-safe; ``MISSING`` is an immutable singleton
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import Any, Final

# ==============================================================================
# SENTINELS
# ==============================================================================


class _MissingType:
    """Type of the :data:`MISSING` sentinel."""

    _instance: _MissingType | None = None

    def __new__(cls) -> _MissingType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Final = _MissingType()

# ==============================================================================
# COMPILED PATTERNS
# ==============================================================================

_NUMERIC_KEY = re.compile(
    r"^\s*(?:[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+)?\s*$",
    re.ASCII,
)

# ==============================================================================
# PUBLIC HELPERS
# ==============================================================================


def is_primitive(value: Any) -> bool:
    """Return ``True`` for numbers, booleans, strings, ``None`` and ``MISSING``."""
    return value is None or value is MISSING or isinstance(value, (bool, int, float, str))


def is_falsy_primitive(value: Any) -> bool:
    """Return ``True`` when ``value`` is a primitive that counts as false.

    NaN counts as false alongside zero, ``False``, the empty string, ``None``
    and ``MISSING``. Containers are never falsy primitives, even when empty.
    """
    if not is_primitive(value):
        return False
    if isinstance(value, float) and math.isnan(value):
        return True
    return not value


def _is_numeric_key(key: Any) -> bool:
    if isinstance(key, bool):
        return False
    if isinstance(key, (int, float)):
        return not math.isnan(key)
    if isinstance(key, str):
        return _NUMERIC_KEY.match(key) is not None
    return False


def is_numeric_map(mapping: Any, fast_check: bool = True) -> bool:
    """Check whether a mapping is keyed by numbers.

    Args:
        mapping: Mapping to inspect. Lists and tuples are never numeric maps.
        fast_check: Only inspect the first key when ``True``.

    Returns:
        ``True`` when the inspected keys are all numeric (integers, floats or
        strings that read as numbers). An empty mapping is never numeric.
    """
    if not isinstance(mapping, Mapping):
        return False
    keys = iter(mapping)
    if fast_check:
        first = next(keys, MISSING)
        return first is not MISSING and _is_numeric_key(first)
    return bool(mapping) and all(_is_numeric_key(key) for key in keys)


def transgress(obj: Any) -> dict[str, Any]:
    """Return a plain dictionary of every own attribute on ``obj``.

    ``vars()`` skips members stored in ``__slots__`` and the ``args`` of an
    exception; both are included here. Mappings are copied as-is.
    """
    if isinstance(obj, Mapping):
        return dict(obj)
    collected: dict[str, Any] = {}
    if isinstance(obj, BaseException):
        collected["args"] = obj.args
    for cls in reversed(type(obj).__mro__):
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__"):
                continue
            try:
                collected[name] = getattr(obj, name)
            except AttributeError:
                continue
    collected.update(getattr(obj, "__dict__", {}))
    return collected
