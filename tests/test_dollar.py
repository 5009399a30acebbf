import dollar


def test_flat_namespace_exposes_helpers():
    assert dollar.md5("asdf") == "912ec803b2ce49e4a541068d495ab570"
    assert dollar.Version("1.2.3").gte("1.2.3")
    assert dollar.device.get_type("iphone") == dollar.device.TYPE_IPHONE
    assert dollar.camelize_keys({"a_b": 1}) == {"aB": 1}
    assert dollar.merge_config({"all": {"a": 1}}) == {"a": 1}


def test_all_names_resolve():
    for name in dollar.__all__:
        assert hasattr(dollar, name), name
