# src/todo_groups/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires storage, repository, screens and the tab navigator into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import TAB_ACTIVE, TAB_ARCHIVE, AppState
from ..screens.active import ActiveGroupsScreen
from ..screens.archive import ArchiveScreen
from ..screens.navigation import TabNavigator
from ..storage.kv_store import open_storage
from ..storage.repository import DEFAULT_GROUPS_KEY, GroupRepository

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    if getattr(settings, "storage_backend", "sqlite") != "memory":
        settings.storage_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, storage=None) -> AppState:
    """
    Create AppState from the provided settings.

    Settings and storage are injectable for tests; if settings is None,
    falls back to get_settings(), and storage comes from the configured backend.
    Screens are not mounted yet (see TabNavigator.start).
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if storage is None:
        storage = open_storage(settings)

    repo = GroupRepository(storage, getattr(settings, "groups_key", DEFAULT_GROUPS_KEY))
    active = ActiveGroupsScreen(repo)
    archive = ArchiveScreen(repo)
    navigator = TabNavigator({TAB_ACTIVE: active, TAB_ARCHIVE: archive})

    return AppState(
        settings=settings,
        repo=repo,
        active=active,
        archive=archive,
        navigator=navigator,
    )
