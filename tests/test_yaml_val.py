import pytest

from procdeck.yaml_val import ConfigError, Val, current_os, value_to_string


def test_as_bool():
    assert Val(True).as_bool() is True
    with pytest.raises(ConfigError, match="Expected bool at <config>"):
        Val("yes").as_bool()


def test_as_usize():
    assert Val(5).as_usize() == 5
    for bad in (-1, True, 1.5, "5"):
        with pytest.raises(ConfigError, match="Expected int"):
            Val(bad).as_usize()


def test_as_str():
    assert Val("cmd").as_str() == "cmd"
    with pytest.raises(ConfigError, match="Expected string"):
        Val(3).as_str()


def test_as_array_keeps_items():
    items = Val(["a", "b"]).as_array()
    assert [item.raw for item in items] == ["a", "b"]
    with pytest.raises(ConfigError, match="Expected array"):
        Val({"a": 1}).as_array()


def test_as_object_keeps_order_and_values():
    obj = Val({"b": 1, "a": 2}).as_object()
    assert list(obj) == ["b", "a"]
    assert obj["a"].raw == 2
    with pytest.raises(ConfigError, match="Expected object"):
        Val([1]).as_object()


def test_error_path_through_objects():
    web = Val({"procs": {"web": 1}}).as_object()["procs"].as_object()["web"]
    with pytest.raises(ConfigError, match=r"<config>\.procs\.web$"):
        web.as_str()


def test_error_path_through_arrays():
    item = Val({"cmd": ["a", 2]}).as_object()["cmd"].as_array()[1]
    with pytest.raises(ConfigError, match=r"<config>\.cmd\.1$"):
        item.as_str()


def test_error_at():
    val = Val({"x": None}).as_object()["x"]
    err = val.error_at("Expected string or null")
    assert isinstance(err, ConfigError)
    assert str(err).endswith(" at <config>.x")


def test_value_to_string_scalars():
    assert value_to_string(None) == "null"
    assert value_to_string(True) == "true"
    assert value_to_string(3) == "3"
    assert value_to_string("name") == "name"


def test_value_to_string_rejects_collections():
    with pytest.raises(ConfigError, match="arrays"):
        value_to_string([1])
    with pytest.raises(ConfigError, match="objects"):
        value_to_string({"a": 1})


def test_select_current_os():
    val = Val({"$select": "os", current_os(): "here", "$else": "elsewhere"})
    assert val.raw == "here"


def test_select_else():
    val = Val({"$select": "os", "$else": "fallback"})
    assert val.raw == "fallback"


def test_select_inside_object():
    obj = Val({"shell": {"$select": "os", "$else": "run"}}).as_object()
    assert obj["shell"].as_str() == "run"
    assert obj["shell"].path.endswith("$else")


def test_select_without_match():
    with pytest.raises(ConfigError, match="No matching condition"):
        Val({"$select": "os"})


def test_select_requires_os():
    with pytest.raises(ConfigError, match='Expected "os"'):
        Val({"$select": "arch", "$else": 1})


def test_select_only_when_first_key():
    val = Val({"a": 1, "$select": "os"})
    assert val.as_object()["a"].raw == 1