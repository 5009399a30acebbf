import pytest

from dollar.utils import device
from dollar.utils.device import DEVICE_TYPES, DeviceType, get_type


@pytest.mark.parametrize(
    ("parts", "expected"),
    [
        (("iPhOnE 6 plus",), device.TYPE_IPHONE),
        (("andRoid; nexus 5",), device.TYPE_ANDROID),
        (("asdf",), device.TYPE_UNKNOWN),
        (("iPaD;%$#@!",), device.TYPE_IPAD),
        (("asdf", "iphone", "%$#@!"), device.TYPE_IPHONE),
        (("Mozilla", "WEB client"), device.TYPE_WEB),
    ],
)
def test_get_type(parts, expected):
    assert get_type(*parts) == expected


def test_get_type_without_arguments_is_unknown():
    assert get_type() == DeviceType.UNKNOWN
    assert get_type("   ") == DeviceType.UNKNOWN
    assert get_type(None) == DeviceType.UNKNOWN


def test_get_type_first_listed_name_wins():
    assert get_type("web view on android") == DeviceType.ANDROID
    assert get_type("ipad", "iphone") == DeviceType.IPHONE


def test_type_codes_are_stable_integers():
    assert [int(t) for t in DeviceType] == [0, 1, 2, 3, 4]
    assert device.TYPE_ANDROID == 3
    assert DEVICE_TYPES[DeviceType.WEB] == "web"
    assert DeviceType.UNKNOWN not in DEVICE_TYPES
