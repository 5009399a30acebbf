"""Exception hierarchy shared by the utility modules.

Key Responsibilities:
    - Provide a base exception carrying a message and structured details
    - Define the specific failures raised by versioning and encoding helpers

Collaborators:
    - Upstream: ``versioning``, ``hashing`` raise these errors on invalid input
    - Downstream: Callers catch ``DollarError`` or the matching builtin base

Side Effects:
    - None; exceptions are plain data containers

Thread Safety:
    - Thread-safe; instances are not shared
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

# ==============================================================================
# TYPE DEFINITIONS
# ==============================================================================

__all__ = ["DollarError", "InvalidVersion", "RandomSourceError", "UnsupportedEncoding"]


class DollarError(Exception):
    """Base exception for every error raised by the library."""

    def __init__(self, message: str, *, details: Mapping[str, Any] | None = None) -> None:
        """Initialise the exception with a message and optional details.

        Args:
            message: Human readable error summary.
            details: Additional attributes describing the failing input.
        """
        super().__init__(message)
        self.message = message
        self.details: dict[str, Any] = dict(details or {})

    def to_dict(self) -> dict[str, Any]:
        """Return a dictionary representation with empty details dropped."""
        payload: dict[str, Any] = {"error": type(self).__name__, "message": self.message}
        if self.details:
            payload["details"] = dict(self.details)
        return payload


class InvalidVersion(DollarError, TypeError):
    """Raised when a version is built from, or compared with, a non-string."""

    def __init__(self, value: object) -> None:
        super().__init__(
            f"invalid version: {value!r}",
            details={"value": value, "type": type(value).__name__},
        )
        self.value = value


class UnsupportedEncoding(DollarError, ValueError):
    """Raised when a digest or random string is requested in an unknown encoding."""

    def __init__(self, encoding: str, supported: tuple[str, ...]) -> None:
        super().__init__(
            f"unsupported encoding: {encoding!r}",
            details={"encoding": encoding, "supported": list(supported)},
        )
        self.encoding = encoding


class RandomSourceError(DollarError, OSError):
    """Raised when the operating system random source keeps failing."""
