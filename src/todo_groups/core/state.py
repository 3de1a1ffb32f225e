# src/todo_groups/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..screens.active import ActiveGroupsScreen
from ..screens.archive import ArchiveScreen
from ..screens.navigation import TabNavigator
from ..storage.repository import GroupRepository

TAB_ACTIVE = "active"
TAB_ARCHIVE = "archive"


@dataclass(slots=True)
class AppState:
    # Settings object (real Settings or a test namespace).
    settings: Any

    repo: GroupRepository
    active: ActiveGroupsScreen
    archive: ArchiveScreen
    navigator: TabNavigator
