# SimpleArgParse — (c) 2025 SimpleArgParse contributors — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os
import shutil
import sys

import pythonjsonlogger.json
from rich.logging import RichHandler

JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def get_program_name() -> str:
    """Returns the name of the running program, used as the default `prog`."""
    script = sys.argv[0] if sys.argv and sys.argv[0] else ""
    if not script or script == "-c":
        return os.path.basename(sys.executable) or "python"
    program = shutil.which(script)
    if program:
        return os.path.basename(program)
    return os.path.basename(script)


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
            return (
                "docker" in content
                or "kubepods" in content
                or "containerd" in content
                or "podman" in content
            )
    except OSError:
        return False


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    console_log_level: int = logging.WARNING,
):
    """
    Configure logging with either Rich console output or structured JSON output.

    Args:
        mode (str | None):
            "cli" for human-readable Rich logs, "json" for machine-readable logs.
            Falls back to the `SIMPLEARGPARSE_LOG_MODE` environment variable, then
            to "json" inside containers and "cli" elsewhere.
        log_filename (str | None):
            Optional path of a debug log file, written as JSON in "json" mode and
            as plain text otherwise. No file handler is installed when None.
        console_log_level (int):
            Logging level for console output.

    Raises:
        ValueError: If an invalid logging `mode` is passed.
    """
    if not mode:
        mode = os.getenv("SIMPLEARGPARSE_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )

    if mode == "cli":
        console_handler: RichHandler | logging.StreamHandler = RichHandler(
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    elif mode == "json":
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(
            pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT)
        )
    else:
        raise ValueError(f"Invalid log mode: {mode}")

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    if root.hasHandlers():
        root.handlers.clear()

    console_handler.setLevel(console_log_level)
    root.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(logging.DEBUG)
        if mode == "json":
            file_handler.setFormatter(
                pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT)
            )
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
        root.addHandler(file_handler)

    logger = logging.getLogger("simpleargparse")
    logger.propagate = True
    logger.debug("Logging initialized in '%s' mode.", mode)
