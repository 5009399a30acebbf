"""Digest, base64 and random token shortcuts.

Key Responsibilities:
    - Hash text or bytes with MD5, SHA-1 or SHA-256 in a chosen encoding
    - Encode and decode base64 text
    - Generate random strings from the operating system CSPRNG

Side Effects:
    - ``random_string`` reads from the operating system random source

Thread Safety:
    - Thread-safe; no shared state
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import re
import secrets
from collections.abc import Callable
from typing import Any

from tenacity import RetryCallState, Retrying, retry_if_exception_type, stop_after_attempt

from .errors import RandomSourceError, UnsupportedEncoding
from .logging import get_logger

logger = get_logger(__name__)

DIGEST_ENCODINGS: tuple[str, ...] = ("hex", "base64", "latin1", "binary")
DEFAULT_RANDOM_TRIES = 3

_NON_BASE64 = re.compile(r"[^A-Za-z0-9+/]")

# ==============================================================================
# ENCODING HELPERS
# ==============================================================================


def _to_bytes(data: str | bytes) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"expected str or bytes-like data, got {type(data).__name__}")


def _encode(raw: bytes, enc: str) -> str:
    encoding = enc.lower()
    if encoding == "hex":
        return raw.hex()
    if encoding == "base64":
        return base64.b64encode(raw).decode("ascii")
    if encoding in ("latin1", "binary"):
        return raw.decode("latin-1")
    raise UnsupportedEncoding(enc, DIGEST_ENCODINGS)


def _digest(algorithm: Callable[[bytes], Any], data: str | bytes, enc: str) -> str:
    return _encode(algorithm(_to_bytes(data)).digest(), enc)


# ==============================================================================
# DIGESTS
# ==============================================================================


def md5(data: str | bytes, enc: str = "hex") -> str:
    """Return the MD5 digest of ``data`` in the given encoding."""
    return _digest(hashlib.md5, data, enc)


def sha1(data: str | bytes, enc: str = "hex") -> str:
    """Return the SHA-1 digest of ``data`` in the given encoding."""
    return _digest(hashlib.sha1, data, enc)


def sha256(data: str | bytes, enc: str = "hex") -> str:
    """Return the SHA-256 digest of ``data`` in the given encoding."""
    return _digest(hashlib.sha256, data, enc)


# ==============================================================================
# BASE64
# ==============================================================================


def base64encode(data: str | bytes) -> str:
    """Return ``data`` encoded as base64 text."""
    return base64.b64encode(_to_bytes(data)).decode("ascii")


def base64decode(data: str | bytes) -> str:
    """Decode base64 ``data`` into text.

    Decoding is lenient: characters outside the base64 alphabet are ignored
    and missing padding is tolerated. Bytes that are not valid UTF-8 are
    replaced with U+FFFD.
    """
    text = data.decode("ascii", errors="ignore") if isinstance(data, bytes) else data
    cleaned = _NON_BASE64.sub("", text.split("=", 1)[0])
    if len(cleaned) % 4 == 1:
        cleaned = cleaned[:-1]
    try:
        decoded = base64.b64decode(cleaned + "=" * (-len(cleaned) % 4))
    except binascii.Error:
        decoded = b""
    return decoded.decode("utf-8", errors="replace")


# ==============================================================================
# RANDOM STRINGS
# ==============================================================================


def _log_retry(state: RetryCallState) -> None:
    error = state.outcome.exception() if state.outcome else None
    logger.warning(
        "random_string.retry",
        attempt=state.attempt_number,
        error=str(error),
    )


def random_string(
    length: int,
    enc: str = "base64",
    num_tries: int = DEFAULT_RANDOM_TRIES,
) -> str:
    """Generate ``length`` random bytes rendered as text.

    Args:
        length: How many random bytes to generate (48 bytes give 64 base64
            characters).
        enc: Encoding of the returned string: ``base64``, ``hex`` or ``latin1``.
        num_tries: How many attempts to allow before giving up.

    Returns:
        Encoded random string.

    Raises:
        UnsupportedEncoding: If ``enc`` is unknown.
        RandomSourceError: If the random source failed on every attempt.
    """
    if enc.lower() not in DIGEST_ENCODINGS:
        raise UnsupportedEncoding(enc, DIGEST_ENCODINGS)
    retrying = Retrying(
        stop=stop_after_attempt(max(1, num_tries)),
        retry=retry_if_exception_type(OSError),
        before_sleep=_log_retry,
        reraise=True,
    )
    try:
        raw = retrying(secrets.token_bytes, length)
    except OSError as exc:
        raise RandomSourceError(
            "random source unavailable",
            details={"length": length, "attempts": max(1, num_tries), "error": str(exc)},
        ) from exc
    return _encode(raw, enc)
