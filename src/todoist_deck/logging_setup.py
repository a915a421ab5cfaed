# src/todoist_deck/logging_setup.py

"""
Logging for the plugin process.

The Stream Deck host starts the plugin without a terminal and keeps whatever
it writes to stderr in its own log, so stderr gets a short, filtered stream.
The full DEBUG trail (every fetch URL, every ignored host event) goes to
<data_dir>/plugin.log instead.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "plugin.log"

_OWN_PREFIX = "todoist_deck."

# Chatty at INFO/DEBUG: one line per request or frame.
_TRANSPORT_LOGGERS = ("httpx", "httpcore", "websockets")

_FORMAT = logging.Formatter(
    fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


class _ConsoleNoiseFilter(logging.Filter):
    """
    Minimum level per logger family on stderr:

        todoist_deck.*                 everything
        httpx / httpcore / websockets  WARNING
        anything else                  ERROR (py.warnings included)
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(_OWN_PREFIX):
            return True
        if record.name.split(".", 1)[0] in _TRANSPORT_LOGGERS:
            return record.levelno >= logging.WARNING
        return record.levelno >= logging.ERROR


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_FORMAT)
    handler.addFilter(_ConsoleNoiseFilter())
    return handler


def _file_handler(log_dir: Path, level: int) -> logging.Handler:
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(str(log_dir / LOG_FILE_NAME), encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(_FORMAT)
    return handler


def setup_logging(
    *,
    log_dir: str | Path = ".local/todoist_deck",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Route the root logger to stderr (filtered) and to <log_dir>/plugin.log.

    Replaces any handlers already on the root logger, so calling it again
    (as the tests do) does not double every line. cli.main runs it before
    the host connection is opened.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    root.addHandler(_console_handler(console_level))
    root.addHandler(_file_handler(Path(log_dir), file_level))

    # warnings.warn(...) from dependencies lands in the file as 'py.warnings'.
    logging.captureWarnings(True)

    # Their DEBUG output is per-byte; INFO is enough even for the file.
    for name in _TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(logging.INFO)
