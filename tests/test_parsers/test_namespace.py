import pytest

from simpleargparse.parser import ArgumentParser, Namespace


def test_lookup():
    namespace = Namespace({"file": "input.txt", "verbose": True, "tags": ["a"]})
    assert namespace["file"] == "input.txt"
    assert namespace.get("verbose") is True
    assert namespace.tags == ["a"]
    assert namespace.get("missing") is None
    assert "file" in namespace
    assert "missing" not in namespace
    assert len(namespace) == 3


def test_attribute_lookup_of_hyphenated_key():
    namespace = Namespace({"dry-run": True})
    assert namespace.dry_run is True
    with pytest.raises(AttributeError):
        namespace.missing


def test_has_value():
    namespace = Namespace({"env": None, "debug": False})
    assert not namespace.has_value("env")
    assert namespace.has_value("debug")
    assert not namespace.has_value("missing")


def test_append_creates_list():
    namespace = Namespace({"tag": None})
    namespace.append("tag", "a")
    namespace.append("tag", "b")
    namespace.append("other", 1)
    assert namespace["tag"] == ["a", "b"]
    assert namespace["other"] == [1]


def test_merge_overwrites():
    parent = Namespace({"name": "parent", "verbose": True})
    child = Namespace({"name": "child", "path": "x"})
    parent.merge(child)
    assert parent.as_dict() == {"name": "child", "verbose": True, "path": "x"}
    assert child.as_dict() == {"name": "child", "path": "x"}


def test_repr_and_equality():
    namespace = Namespace({"file": "a", "verbose": False})
    assert repr(namespace) == "Namespace(file='a', verbose=False)"
    assert namespace == Namespace({"verbose": False, "file": "a"})
    assert namespace == {"file": "a", "verbose": False}
    assert namespace != Namespace({"file": "b", "verbose": False})


def test_key_named_like_a_method_needs_item_access():
    parser = ArgumentParser(prog="tool")
    parser.add_argument("--items")
    parser.add_argument("--get")
    namespace = parser.parse_known(["--items", "x", "--get", "y"])
    assert namespace["items"] == "x"
    assert namespace["get"] == "y"
    assert callable(namespace.items)
    assert namespace.as_dict() == {"items": "x", "get": "y"}
