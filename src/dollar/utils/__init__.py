"""Utility modules backing the flat ``dollar`` call surface."""

from .errors import DollarError, InvalidVersion, RandomSourceError, UnsupportedEncoding


__all__ = ["DollarError", "InvalidVersion", "RandomSourceError", "UnsupportedEncoding"]
