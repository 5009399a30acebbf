"""Device platform detection from free-form platform strings."""

from __future__ import annotations

from collections.abc import Mapping
from enum import IntEnum
from typing import Any


class DeviceType(IntEnum):
    """Numeric device type codes."""

    UNKNOWN = 0
    IPHONE = 1
    IPAD = 2
    ANDROID = 3
    WEB = 4


TYPE_UNKNOWN = DeviceType.UNKNOWN
TYPE_IPHONE = DeviceType.IPHONE
TYPE_IPAD = DeviceType.IPAD
TYPE_ANDROID = DeviceType.ANDROID
TYPE_WEB = DeviceType.WEB

# Checked in order; the first name found in the platform string wins.
DEVICE_TYPES: Mapping[DeviceType, str] = {
    DeviceType.IPHONE: "iphone",
    DeviceType.IPAD: "ipad",
    DeviceType.ANDROID: "android",
    DeviceType.WEB: "web",
}


def get_type(*parts: Any) -> DeviceType:
    """Detect the device type mentioned in ``parts``.

    The parts are joined with spaces and searched case-insensitively for each
    known platform name; the first hit wins.

    Example:
        >>> get_type("asdf", "iPhone", "%$#@!")
        <DeviceType.IPHONE: 1>
    """
    platform = " ".join("" if part is None else str(part) for part in parts).strip().lower()
    if not platform:
        return DeviceType.UNKNOWN
    for device_type, name in DEVICE_TYPES.items():
        if name in platform:
            return device_type
    return DeviceType.UNKNOWN
