"""Utilities for parsing and comparing dotted version strings.

Key Responsibilities:
    - Provide a lightweight ``Version`` dataclass wrapping raw version text
    - Compare dotted versions segment by segment
    - Extract ``1.2.3 (45)`` style version and build pairs

Side Effects:
    - None; operations are pure and return new instances

Thread Safety:
    - Thread-safe; dataclass instances are immutable
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from itertools import zip_longest
from re import Pattern
from typing import Any

from .errors import InvalidVersion
from .logging import get_logger

logger = get_logger(__name__)

# ==============================================================================
# COMPILED PATTERNS
# ==============================================================================

VERSION_PATTERN: Pattern[str] = re.compile(r"^\s*(\d+(?:\.\d+){0,2})\s*(?:\((\d+)\))?\s*$", re.ASCII)
_LEADING_DIGITS: Pattern[str] = re.compile(r"^\s*(\d+)", re.ASCII)

# ==============================================================================
# COMPARISON
# ==============================================================================


def _segments(value: str) -> list[int]:
    numbers = []
    for part in value.split("."):
        match = _LEADING_DIGITS.match(part)
        numbers.append(int(match.group(1)) if match else 0)
    return numbers


def compare_versions(left: str, right: str) -> int:
    """Three-way compare two dotted version strings.

    Segments are compared numerically from left to right. The shorter version
    is padded with zeros and segments without leading digits count as ``0``,
    so malformed input never raises.

    Returns:
        ``-1`` if ``left`` sorts first, ``1`` if ``right`` does, else ``0``.
    """
    for a, b in zip_longest(_segments(left), _segments(right), fillvalue=0):
        if a != b:
            return -1 if a < b else 1
    return 0


# ==============================================================================
# DATA MODELS
# ==============================================================================


@dataclass(frozen=True, eq=False)
class Version:
    """Version text that compares numerically with other versions.

    Attributes:
        raw: Version string exactly as supplied.
    """

    raw: str

    def __post_init__(self) -> None:
        if not isinstance(self.raw, str):
            raise InvalidVersion(self.raw)

    def __str__(self) -> str:
        return self.raw

    def _compare(self, other: Version | str) -> int:
        if isinstance(other, Version):
            return compare_versions(self.raw, other.raw)
        if isinstance(other, str):
            return compare_versions(self.raw, other)
        raise InvalidVersion(other)

    def lt(self, other: Version | str) -> bool:
        """Return ``True`` if this version sorts before ``other``."""
        return self._compare(other) < 0

    def lte(self, other: Version | str) -> bool:
        """Return ``True`` if this version sorts before or equal to ``other``."""
        return self._compare(other) <= 0

    def gt(self, other: Version | str) -> bool:
        """Return ``True`` if this version sorts after ``other``."""
        return self._compare(other) > 0

    def gte(self, other: Version | str) -> bool:
        """Return ``True`` if this version sorts after or equal to ``other``."""
        return self._compare(other) >= 0

    def eq(self, other: Version | str) -> bool:
        """Return ``True`` if both versions have the same numeric segments."""
        return self._compare(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.lt(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.lte(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.gt(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.gte(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.eq(other)

    def __hash__(self) -> int:
        segments = _segments(self.raw)
        while segments and segments[-1] == 0:
            segments.pop()
        return hash(tuple(segments))

    @classmethod
    def parse(cls, value: Any) -> ParsedVersion:
        """Parse a ``MAJOR[.MINOR[.PATCH]] [(BUILD)]`` string.

        See :func:`parse_version`.
        """
        return parse_version(value)


@dataclass(frozen=True, slots=True)
class ParsedVersion:
    """Version and build number extracted from a display string."""

    version: Version
    build: int = 0


def parse_version(value: Any) -> ParsedVersion:
    """Split ``"1.2.3 (45)"`` into its version and build number.

    Args:
        value: Up to three dot-separated numbers, optionally followed by a
            parenthesised build number.

    Returns:
        Parsed pair. Input that is not a string or does not match yields an
        empty version and build ``0``.
    """
    match = VERSION_PATTERN.match(value) if isinstance(value, str) else None
    if match is None:
        logger.debug("version.parse.no_match", value=repr(value))
        return ParsedVersion(Version(""), 0)
    version, build = match.groups()
    return ParsedVersion(Version(version), int(build) if build else 0)
