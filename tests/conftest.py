# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_groups.cli.bootstrap import create_initial_state
from todo_groups.core.state import AppState
from todo_groups.storage.kv_store import MemoryKeyValueStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the developer's environment / .env.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        storage_backend="memory",
        storage_path=tmp_path / "storage.sqlite3",
        groups_key="@todo_groups_v1",
        task_preview_limit=6,
        console_clear=False,
    )


@pytest.fixture()
def storage() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture()
def state(settings: SimpleNamespace, storage: MemoryKeyValueStore) -> AppState:
    """AppState wired to in-memory storage. Screens are not mounted yet."""
    return create_initial_state(settings=settings, storage=storage)
