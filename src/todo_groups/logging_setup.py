# src/todo_groups/logging_setup.py

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from pathlib import Path

APP_LOGGER = "todo_groups"
LOG_FILE_NAME = "todo.log"

# Per-write debug lines would interleave with the rendered tabs.
QUIET_APP_LOGGERS = ("todo_groups.storage",)

_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _under(name: str, prefix: str) -> bool:
    return name == prefix or name.startswith(prefix + ".")


class ConsoleFilter(logging.Filter):
    """
    Console-only filter; the log file keeps everything.

    App records pass, except loggers under `quiet` which need WARNING+.
    Anything else (third-party, 'py.warnings') needs ERROR+.
    """

    def __init__(self, app: str = APP_LOGGER, quiet: Iterable[str] = QUIET_APP_LOGGERS) -> None:
        super().__init__()
        self.app = app
        self.quiet = tuple(quiet)

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if not _under(name, self.app):
            return record.levelno >= logging.ERROR
        if any(_under(name, q) for q in self.quiet):
            return record.levelno >= logging.WARNING
        return True


def setup_logging(
    *,
    log_dir: str | Path = ".local/todo",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Route all logging to stderr (filtered, console_level) and to
    <log_dir>/todo.log (file_level). Replaces existing root handlers, so
    calling it again does not duplicate output. Returns the log file path.
    """
    log_file = Path(log_dir) / LOG_FILE_NAME
    log_file.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.addFilter(ConsoleFilter())

    file = logging.FileHandler(str(log_file), encoding="utf-8")
    file.setLevel(file_level)

    root = logging.getLogger()
    root.setLevel(min(console_level, file_level))
    for h in list(root.handlers):
        root.removeHandler(h)
    for h in (console, file):
        h.setFormatter(formatter)
        root.addHandler(h)

    logging.captureWarnings(True)
    return log_file
