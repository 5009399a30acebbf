import math

import pytest

from dollar.utils.casing import camelize_keys, snake_to_camel
from dollar.utils.values import MISSING


def _noop():
    return None


def test_snake_to_camel_converts_string():
    assert camelize_keys("my_key_name") == "myKeyName"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("my_key_name", "myKeyName"),
        ("_private", "Private"),
        ("trailing_", "trailing_"),
        ("double__under", "double_Under"),
        ("upper_Case", "upper_Case"),
        ("digit_1", "digit_1"),
        ("caf_é", "caf_é"),
        ("alreadyCamel", "alreadyCamel"),
        (234, 234),
        (None, None),
        ("", ""),
    ],
)
def test_snake_to_camel_cases(value, expected):
    assert snake_to_camel(value) == expected


def test_drops_callable_values():
    payload = {"key_my": _noop, "my_key_name2": 234, "my_key_name3": "asdf"}
    assert camelize_keys(payload) == {"myKeyName2": 234, "myKeyName3": "asdf"}


def test_drops_lambdas_and_methods():
    payload = {"a_b": lambda: 1, "c_d": "x".upper, "e_f": str, "g_h": 1}
    assert camelize_keys(payload) == {"gH": 1}


def test_converts_nested_mappings():
    payload = {
        "key_my": _noop,
        "my_key_name2": 234,
        "my_key_name3": "asdf",
        "this_is_my_key": {"xyz_a": 2, "abc_d": "asdf"},
    }
    assert camelize_keys(payload) == {
        "myKeyName2": 234,
        "myKeyName3": "asdf",
        "thisIsMyKey": {"xyzA": 2, "abcD": "asdf"},
    }


def test_converts_nested_lists_of_mappings():
    payload = {
        "key_my": _noop,
        "my_key_name2": 234,
        "this_is_my_key": [{"xyz_a": 2, "abc_d": "asdf"}, {"xyz_a": 2, "abc_d": "asdf"}],
    }
    assert camelize_keys(payload) == {
        "myKeyName2": 234,
        "thisIsMyKey": [{"xyzA": 2, "abcD": "asdf"}, {"xyzA": 2, "abcD": "asdf"}],
    }


def test_converts_every_mapping_in_root_list():
    item = {"key_my": _noop, "my_key_name2": 234, "my_key_name3": "asdf"}
    assert camelize_keys([item, dict(item)]) == [
        {"myKeyName2": 234, "myKeyName3": "asdf"},
        {"myKeyName2": 234, "myKeyName3": "asdf"},
    ]


def test_list_of_primitives_is_copied():
    source = ["abcd", "efgh", 1, 2.5, True]
    result = camelize_keys(source)
    assert result == source
    assert result is not source


def test_strings_inside_lists_are_converted_like_keys():
    assert camelize_keys(["snake_case", 3]) == ["snakeCase", 3]


def test_mapping_values_are_not_converted():
    assert camelize_keys({"my_key": "some_value"}) == {"myKey": "some_value"}


@pytest.mark.parametrize("value", [MISSING, None, False, "", 0, 0.0])
def test_falsy_roots_are_returned_unchanged(value):
    assert camelize_keys(value) is value


def test_nan_root_is_returned_unchanged():
    value = float("nan")
    assert math.isnan(camelize_keys(value))


def test_empty_containers_are_copied():
    assert camelize_keys({}) == {}
    assert camelize_keys([]) == []


def test_missing_and_none_are_preserved():
    assert camelize_keys([None]) == [None]
    assert camelize_keys([MISSING]) == [MISSING]
    assert camelize_keys({"my_key": [MISSING]}) == {"myKey": [MISSING]}
    assert camelize_keys({"my_key": MISSING, "other_key": None}) == {
        "myKey": MISSING,
        "otherKey": None,
    }


def test_nested_lists_and_tuples_keep_their_shape():
    payload = {"outer_key": ([{"inner_key": 1}], ({"deep_key": 2},))}
    assert camelize_keys(payload) == {"outerKey": ([{"innerKey": 1}], ({"deepKey": 2},))}


def test_non_string_keys_are_kept():
    assert camelize_keys({1: "a", "b_c": {2: "d"}}) == {1: "a", "bC": {2: "d"}}


def test_opaque_values_become_none():
    marker = object()
    assert camelize_keys(marker) is None
    assert camelize_keys({"my_key": marker}) == {"myKey": None}
    assert camelize_keys([marker, "a"]) == [None, "a"]


def test_input_is_not_mutated():
    payload = {"my_key": [{"inner_key": 1}]}
    camelize_keys(payload)
    assert payload == {"my_key": [{"inner_key": 1}]}


def test_camelize_keys_is_idempotent():
    payload = {"a_b": [{"c_d": {"e_f": [1, "g_h"]}}], "i_j": None}
    once = camelize_keys(payload)
    assert camelize_keys(once) == once
