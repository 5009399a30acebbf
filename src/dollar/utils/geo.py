"""Helpers for ``"latitude,longitude"`` coordinate strings.

Key Responsibilities:
    - Round both halves of a coordinate string to a fixed resolution
    - Split a coordinate string into float latitude and longitude

Side Effects:
    - None; functions operate on provided strings

Thread Safety:
    - Thread-safe; relies on compiled regular expressions
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal
from re import Pattern
from typing import Any

from .logging import get_logger

logger = get_logger(__name__)

DEFAULT_RESOLUTION = 5

# ==============================================================================
# COMPILED PATTERNS
# ==============================================================================

_LEADING_FLOAT: Pattern[str] = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)

# ==============================================================================
# DATA MODELS
# ==============================================================================


@dataclass(frozen=True, slots=True)
class LatLon:
    """Latitude and longitude pair; halves that could not be read are ``None``."""

    lat: float | None
    lon: float | None


# ==============================================================================
# PUBLIC HELPERS
# ==============================================================================


def _parse_float(value: str) -> float:
    """Read the leading number of ``value``, ``nan`` when there is none."""
    match = _LEADING_FLOAT.match(value)
    return float(match.group(1)) if match else math.nan


def _format_number(value: float) -> str:
    """Render ``value`` in its shortest form without exponent notation."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    if "e" in text:
        text = format(Decimal(text), "f")
    return text


def _round_half_up(value: float, resolution: int) -> float:
    try:
        factor = 10.0**resolution
    except OverflowError:
        factor = math.inf
    scaled = value * factor
    if not math.isfinite(scaled):
        return scaled / factor
    return math.floor(scaled + 0.5) / factor


def round_lat_lon(ll: str, resolution: int | None = DEFAULT_RESOLUTION) -> str:
    """Round a ``"lat,lon"`` string to ``resolution`` decimal places.

    Example:
        >>> round_lat_lon("37.12345,-122.12345", 2)
        '37.12,-122.12'

    Args:
        ll: Comma separated latitude and longitude.
        resolution: Number of decimals to keep; ``0`` or ``None`` fall back to
            the default of five.

    Returns:
        Rounded coordinates joined by a comma, without trailing zeros or
        exponent notation. Overflowing halves render as ``Infinity``.
    """
    resolution = resolution or DEFAULT_RESOLUTION
    parts = ll.split(",")
    lat = _parse_float(parts[0])
    lon = _parse_float(parts[1]) if len(parts) > 1 else math.nan
    rounded = (_format_number(_round_half_up(value, resolution)) for value in (lat, lon))
    return ",".join(rounded)


def ll_split(ll: Any) -> LatLon | None:
    """Parse a ``"lat,lon"`` string into floats.

    Returns:
        ``LatLon`` with each half parsed, or ``None`` when ``ll`` is not a
        string or does not contain a comma.
    """
    if not isinstance(ll, str):
        return None
    parts = ll.split(",")
    if len(parts) < 2:
        logger.debug("geo.ll_split.invalid", value=ll)
        return None
    lat, lon = (_parse_float(part) for part in parts[:2])
    return LatLon(
        lat=None if math.isnan(lat) else lat,
        lon=None if math.isnan(lon) else lon,
    )
