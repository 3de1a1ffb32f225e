# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from todo_groups.logging_setup import ConsoleFilter, setup_logging


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


@pytest.mark.parametrize(
    ("name", "level", "shown"),
    [
        ("todo_groups.screens.active", logging.DEBUG, True),
        ("todo_groups", logging.INFO, True),
        ("todo_groups.storage.kv_store", logging.DEBUG, False),
        ("todo_groups.storage.repository", logging.WARNING, True),
        ("todo_groups_extra", logging.INFO, False),
        ("py.warnings", logging.WARNING, False),
        ("asyncio", logging.ERROR, True),
    ],
)
def test_console_filter(name: str, level: int, shown: bool) -> None:
    assert ConsoleFilter().filter(_record(name, level)) is shown


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def test_setup_logging_writes_debug_to_file(tmp_path: Path, restore_root_logging) -> None:
    log_file = setup_logging(log_dir=tmp_path / "logs", console_level=logging.WARNING)
    setup_logging(log_dir=tmp_path / "logs", console_level=logging.WARNING)

    logging.getLogger("todo_groups.storage.kv_store").debug("kv set key=%s", "k")
    for h in logging.getLogger().handlers:
        h.flush()

    assert log_file == tmp_path / "logs" / "todo.log"
    assert len(logging.getLogger().handlers) == 2
    assert "kv set key=k" in log_file.read_text("utf-8")
