import pytest

from simpleargparse.exceptions import (
    InvalidArgumentNameError,
    InvalidChoiceError,
    MissingArgumentsError,
    ParserConfigError,
    UnrecognizedArgumentsError,
)
from simpleargparse.parser import ArgumentParser, Subparsers
from simpleargparse.signals import HelpSignal


def build_parser():
    parser = ArgumentParser(prog="tool")
    parser.add_argument("--verbose", action="store_true")
    commands = parser.add_subparsers(title="commands", dest="command")
    add = commands.add_parser("add", help="Add a file.")
    add.add_argument("path")
    add.add_argument("-f", alias="--force", action="store_true")
    remove = commands.add_parser("remove", help="Remove a file.")
    remove.add_argument("path")
    remove.add_argument("--recursive", action="store_true")
    return parser


def test_delegates_remaining_tokens():
    parsed = build_parser().parse_known(["add", "x", "-f"])
    assert parsed == {"verbose": False, "command": "add", "path": "x", "force": True}


def test_parent_options_before_command():
    parsed = build_parser().parse_known(["--verbose", "remove", "dir", "--recursive"])
    assert parsed["verbose"] is True
    assert parsed["command"] == "remove"
    assert parsed["path"] == "dir"
    assert parsed["recursive"] is True
    assert "force" not in parsed


def test_parent_option_after_command_is_unrecognized_by_child():
    parser = build_parser()
    with pytest.raises(UnrecognizedArgumentsError) as excinfo:
        parser.parse_known(["add", "x", "--verbose"])
    assert excinfo.value.tokens == ["--verbose"]
    assert excinfo.value.parser is parser.subparsers.parsers["add"]


def test_unknown_command():
    parser = build_parser()
    with pytest.raises(InvalidChoiceError) as excinfo:
        parser.parse_known(["list"])
    assert excinfo.value.choices == ("add", "remove")
    assert excinfo.value.parser is parser


def test_command_is_optional():
    parsed = build_parser().parse_known([])
    assert parsed == {"verbose": False}


def test_child_missing_arguments():
    parser = build_parser()
    with pytest.raises(MissingArgumentsError) as excinfo:
        parser.parse_known(["add"])
    assert excinfo.value.names == ["path"]
    assert excinfo.value.parser.prog == "tool add"


def test_child_overwrites_parent_keys():
    parser = ArgumentParser(prog="tool")
    parser.add_argument("--name", default="parent")
    commands = parser.add_subparsers()
    child = commands.add_parser("run")
    child.add_argument("--name", default="child")

    assert parser.parse_known(["--name", "x", "run"])["name"] == "child"
    assert parser.parse_known(["run", "--name", "y"])["name"] == "y"


def test_no_dest_records_nothing():
    parser = ArgumentParser(prog="tool")
    commands = parser.add_subparsers()
    commands.add_parser("run").add_argument("target")
    parsed = parser.parse_known(["run", "all"])
    assert parsed == {"target": "all"}
    assert commands.key_name == ""


def test_positionals_before_command():
    parser = ArgumentParser(prog="tool")
    parser.add_argument("workspace")
    commands = parser.add_subparsers(dest="command")
    commands.add_parser("build")
    parser.add_argument("profile")

    parsed = parser.parse_known(["ws", "release", "build"])
    assert parsed == {"workspace": "ws", "profile": "release", "command": "build"}


def test_nested_subcommands():
    parser = ArgumentParser(prog="tool")
    top = parser.add_subparsers(dest="command")
    remote = top.add_parser("remote")
    nested = remote.add_subparsers(dest="remote_command")
    add = nested.add_parser("add")
    add.add_argument("name")
    add.add_argument("url")

    parsed = parser.parse_known(["remote", "add", "origin", "git@host:repo"])
    assert parsed == {
        "command": "remote",
        "remote_command": "add",
        "name": "origin",
        "url": "git@host:repo",
    }
    assert add.prog == "tool remote add"


def test_help_in_child():
    parser = build_parser()
    with pytest.raises(HelpSignal) as excinfo:
        parser.parse_known(["add", "-h"])
    assert excinfo.value.parser is parser.subparsers.parsers["add"]


def test_add_subparsers_merges():
    parser = ArgumentParser(prog="tool")
    first = parser.add_subparsers(dest="command")
    first.add_parser("a")
    second = parser.add_subparsers(dest="other")
    second.add_parser("b")

    assert first is second
    assert isinstance(parser.subparsers, Subparsers)
    assert list(parser.subparsers.parsers) == ["a", "b"]
    assert parser.parse_known(["b"]) == {"command": "b"}


def test_duplicate_command_fails():
    parser = ArgumentParser(prog="tool")
    commands = parser.add_subparsers()
    commands.add_parser("run")
    with pytest.raises(ParserConfigError):
        commands.add_parser("run")
    with pytest.raises(InvalidArgumentNameError):
        commands.add_parser("run all")


def test_dest_conflicts_with_argument():
    parser = ArgumentParser(prog="tool")
    parser.add_argument("--command")
    with pytest.raises(ParserConfigError):
        parser.add_subparsers(dest="command")


def test_child_inherits_console():
    parser = ArgumentParser(prog="tool")
    child = parser.add_subparsers().add_parser("run")
    assert child.console is parser.console
    assert isinstance(child, ArgumentParser)
