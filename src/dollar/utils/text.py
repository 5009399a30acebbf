"""String formatting and matching helpers.

Key Responsibilities:
    - Normalise, pluralise and HTML-break free text
    - Join URL-style path segments
    - Match strings against one or more regular expressions
    - Extract IPv4 addresses and mask card numbers

Side Effects:
    - None; functions return new strings

Thread Safety:
    - Thread-safe; relies on compiled regular expressions
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from functools import reduce
from re import Pattern
from typing import Any

# ==============================================================================
# COMPILED PATTERNS
# ==============================================================================

NORMALIZE_PATTERN: Pattern[str] = re.compile(r"[\W\s]+", re.ASCII)
NEWLINE_PATTERN: Pattern[str] = re.compile(r"([^>\r\n]?)(\r\n|\n\r|\r|\n)")
IPV4_PATTERN: Pattern[str] = re.compile(r"(\d+(?:\.\d+){3})", re.ASCII)
AMEX_PATTERN: Pattern[str] = re.compile(r"^(American|Amex)", re.IGNORECASE)
_LEADING_INT: Pattern[str] = re.compile(r"^\s*([+-]?\d+)", re.ASCII)

AMEX_TEMPLATE = "XXXX XXXXXX XXXXX"
CARD_TEMPLATE = "XXXX XXXX XXXX XXXX"
BREAK_TAG = "<br>"

# ==============================================================================
# PUBLIC HELPERS
# ==============================================================================


def normalize_string(value: str) -> str:
    """Strip every non-word character and lowercase the result.

    Example:
        >>> normalize_string("McDonald's Restaurant")
        'mcdonaldsrestaurant'
    """
    return NORMALIZE_PATTERN.sub("", value).lower()


def pluralize(num: Any, unit: str) -> str:
    """Attach ``unit`` to ``num`` in singular or plural form.

    The unit is singular when the integer prefix of ``num`` is one, so both
    ``1.5`` and ``"1.5"`` read as ``"1.5 meter"``. This is kept on purpose for
    output compatibility with existing callers; it is not the "plural unless
    exactly one" rule.
    """
    match = _LEADING_INT.match(str(num))
    singular = match is not None and int(match.group(1)) == 1
    return f"{num} {unit}{'' if singular else 's'}"


def nl2br(value: Any) -> str:
    """Insert ``<br>`` before every newline sequence in ``value``."""
    return NEWLINE_PATTERN.sub(rf"\1{BREAK_TAG}\2", str(value))


def mkpath(*segments: str) -> str:
    """Join path segments with single slashes.

    One trailing slash is dropped from the left side and one leading slash
    from the right side of every join.

    Example:
        >>> mkpath("/root/", "/mypath", "asdf")
        '/root/mypath/asdf'

    Raises:
        TypeError: If no segments are given.
    """
    return reduce(lambda left, right: f"{left.removesuffix('/')}/{right.removeprefix('/')}", segments)


def matches(value: Any, patterns: Pattern[str] | str | Iterable[Pattern[str] | str]) -> bool:
    """Check whether ``value`` matches a pattern or any pattern in a collection.

    Args:
        value: Candidate string; anything else never matches.
        patterns: Compiled regular expression, pattern string, or a list or
            tuple of either.

    Returns:
        ``True`` when any pattern finds a match anywhere in ``value``.
    """
    if not isinstance(value, str):
        return False
    if isinstance(patterns, (str, Pattern)):
        return re.search(patterns, value) is not None
    if isinstance(patterns, (list, tuple)):
        return any(re.search(pattern, value) is not None for pattern in patterns)
    return False


def extract_ipv4(value: str | None) -> str | None:
    """Return the first dotted-quad address found in ``value``.

    Falsy input, and input without an address, is returned unchanged.
    """
    if not value:
        return value
    match = IPV4_PATTERN.search(value)
    return match.group(1) if match else value


def format_cc_last4(cc_type: str, last4: str) -> str:
    """Mask a card number, keeping only the last four digits.

    American Express cards use the 4-6-5 grouping, every other type 4-4-4-4.
    """
    template = AMEX_TEMPLATE if AMEX_PATTERN.search(cc_type or "") else CARD_TEMPLATE
    return f"{template[:-4]}{last4}"
