import dataclasses

import pytest

from simpleargparse.parser import Argument, ArgumentAction


def test_optional_classification():
    assert Argument("-v").is_optional
    assert Argument("--verbose").is_optional
    assert Argument("file").is_positional
    assert not Argument("file").is_optional


def test_argument_is_immutable():
    arg = Argument("file")
    with pytest.raises(dataclasses.FrozenInstanceError):
        arg.name = "-f"


@pytest.mark.parametrize(
    "name,alias,expected",
    [
        ("-v", None, "v"),
        ("-v", "--verbose", "verbose"),
        ("--dry-run", None, "dry-run"),
        ("file", None, "file"),
        ("file", "--input", "input"),
    ],
)
def test_key_name(name, alias, expected):
    assert Argument(name, alias=alias).key_name == expected


def test_positional_alias_does_not_match():
    arg = Argument("file", alias="--input")
    assert arg.flags == ()
    assert "--input" not in arg.flags


def test_optional_flags_are_name_and_alias():
    arg = Argument("-c", alias="--count")
    assert arg.flags == ("-c", "--count")
    assert "count" not in arg.flags


def test_resolve_default():
    assert Argument("--on", action=ArgumentAction.STORE_TRUE).resolve_default() is False
    assert Argument("--off", action=ArgumentAction.STORE_FALSE).resolve_default() is True
    assert Argument("--name").resolve_default() is None
    assert Argument("--name", default="x").resolve_default() == "x"


def test_usage_and_display_name():
    arg = Argument("-c", alias="--count")
    assert arg.usage == "-c COUNT"
    assert arg.display_name == "-c COUNT, --count COUNT"

    flag = Argument("-v", alias="--verbose", action=ArgumentAction.STORE_TRUE)
    assert flag.usage == "-v"
    assert flag.display_name == "-v, --verbose"

    positional = Argument("file")
    assert positional.usage == "file"
    assert positional.display_name == "file"


def test_choice_text():
    assert Argument("--mode", choices=("dev", "prod")).get_choice_text() == "{dev,prod}"
    assert Argument("mode", choices=("a", "b")).usage == "{a,b}"
    assert Argument("--mode", choices=("a", "b")).usage == "--mode {a,b}"
    assert Argument("-v", action=ArgumentAction.STORE_TRUE).get_choice_text() == ""
