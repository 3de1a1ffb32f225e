# src/todo_groups/screens/archive.py

from __future__ import annotations

import logging

from ..core import groups as ops
from ..storage.repository import GroupRepository

logger = logging.getLogger(__name__)


class ArchiveScreen:
    """
    Read-only view of fully-completed groups.

    Keeps its own copy of the stored collection and re-reads it every time
    the tab becomes visible, so it reflects changes made on the active tab.
    It never writes.
    """

    def __init__(self, repo: GroupRepository) -> None:
        self._repo = repo
        self._groups: ops.Groups = ()
        self._mounted = False

    async def mount(self) -> None:
        self._mounted = True
        await self.reload()

    def unmount(self) -> None:
        self._mounted = False

    async def on_focus(self) -> None:
        await self.reload()

    async def reload(self) -> None:
        loaded = await self._repo.load()
        if not self._mounted:
            logger.debug("Archive screen unmounted during load; dropping result.")
            return
        self._groups = loaded

    @property
    def groups(self) -> ops.Groups:
        return self._groups

    @property
    def completed_groups(self) -> ops.Groups:
        return ops.completed_groups(self._groups)
