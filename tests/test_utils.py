import json
import logging

import pytest
from pythonjsonlogger.json import JsonFormatter
from rich.logging import RichHandler

from simpleargparse.utils import setup_logging

pytestmark = pytest.mark.usefixtures("isolated_logging")


def test_cli_mode(isolated_logging):
    setup_logging(mode="cli")
    assert len(isolated_logging) == 1
    handler = isolated_logging[0]
    assert isinstance(handler, RichHandler)
    assert handler.level == logging.WARNING
    assert logging.getLogger().level == logging.DEBUG


def test_json_mode_from_environment(isolated_logging, monkeypatch, capsys):
    monkeypatch.setenv("SIMPLEARGPARSE_LOG_MODE", "json")
    setup_logging(console_log_level=logging.INFO)

    handler = isolated_logging[0]
    assert not isinstance(handler, RichHandler)
    assert isinstance(handler.formatter, JsonFormatter)

    logging.getLogger("simpleargparse").info("parsed %d tokens", 3)
    record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert record["message"] == "parsed 3 tokens"
    assert record["levelname"] == "INFO"
    assert record["name"] == "simpleargparse"


def test_mode_falls_back_to_container_detection(isolated_logging, monkeypatch):
    monkeypatch.delenv("SIMPLEARGPARSE_LOG_MODE", raising=False)
    monkeypatch.setattr("simpleargparse.utils.running_in_container", lambda: True)
    setup_logging()
    assert isinstance(isolated_logging[0].formatter, JsonFormatter)

    monkeypatch.setattr("simpleargparse.utils.running_in_container", lambda: False)
    setup_logging()
    assert isinstance(isolated_logging[0], RichHandler)


def test_invalid_mode(isolated_logging):
    sentinel = logging.NullHandler()
    isolated_logging.append(sentinel)
    with pytest.raises(ValueError, match="Invalid log mode: xml"):
        setup_logging(mode="xml")
    assert isolated_logging == [sentinel]


def test_plain_log_file(isolated_logging, tmp_path):
    log_file = tmp_path / "debug.log"
    setup_logging(mode="cli", log_filename=str(log_file))
    assert len(isolated_logging) == 2

    logging.getLogger("simpleargparse").debug("delegating to 'add'")
    content = log_file.read_text(encoding="UTF-8")
    assert "[simpleargparse] [DEBUG] Logging initialized in 'cli' mode." in content
    assert "delegating to 'add'" in content


def test_json_log_file(isolated_logging, tmp_path):
    log_file = tmp_path / "debug.log"
    setup_logging(mode="json", log_filename=str(log_file))

    logging.getLogger("simpleargparse").debug("delegating to 'add'")
    lines = log_file.read_text(encoding="UTF-8").splitlines()
    messages = [json.loads(line)["message"] for line in lines]
    assert messages == ["Logging initialized in 'json' mode.", "delegating to 'add'"]
