"""Small, independent helpers for strings, hashes, versions and payloads.

Key Responsibilities:
    - Re-export every helper under one flat namespace
    - Expose ``Version`` and the ``device`` module the way callers expect

Collaborators:
    - Upstream: Applications import helpers from this module
    - Downstream: ``dollar.utils`` and ``dollar.config`` submodules

Side Effects:
    - None; importing the package does not configure logging

Thread Safety:
    - Thread-safe: All functions can be called from multiple threads

Example:
    >>> from dollar import Version, camelize_keys
    >>> Version("1.2.3").gt("1.2.2")
    True
    >>> camelize_keys({"my_key": [{"nested_key": 1}]})
    {'myKey': [{'nestedKey': 1}]}
"""

from .config import merge_config
from .utils import device
from .utils.casing import camelize_keys, snake_to_camel
from .utils.device import DeviceType
from .utils.errors import DollarError, InvalidVersion, RandomSourceError, UnsupportedEncoding
from .utils.geo import LatLon, ll_split, round_lat_lon
from .utils.hashing import base64decode, base64encode, md5, random_string, sha1, sha256
from .utils.text import (
    extract_ipv4,
    format_cc_last4,
    matches,
    mkpath,
    nl2br,
    normalize_string,
    pluralize,
)
from .utils.values import MISSING, is_numeric_map, is_primitive, transgress
from .utils.versioning import ParsedVersion, Version, compare_versions, parse_version

__version__ = "1.0.0"

__all__ = [
    "MISSING",
    "DeviceType",
    "DollarError",
    "InvalidVersion",
    "LatLon",
    "ParsedVersion",
    "RandomSourceError",
    "UnsupportedEncoding",
    "Version",
    "base64decode",
    "base64encode",
    "camelize_keys",
    "compare_versions",
    "device",
    "extract_ipv4",
    "format_cc_last4",
    "is_numeric_map",
    "is_primitive",
    "ll_split",
    "matches",
    "md5",
    "merge_config",
    "mkpath",
    "nl2br",
    "normalize_string",
    "parse_version",
    "pluralize",
    "random_string",
    "round_lat_lon",
    "sha1",
    "sha256",
    "snake_to_camel",
    "transgress",
]
