# src/todo_groups/screens/active.py

"""
Active-groups screen.

Holds the in-memory collection, which is the source of truth for the
session. Every effective mutation:
- replaces the collection,
- notifies listeners,
- schedules a fire-and-forget write of the whole collection.

Writes are serialized so storage sees them in the order they were made.
A failed write leaves the in-memory state as is.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from ..core import groups as ops
from ..core.models import Group, Task, TaskFilter
from ..core.ports import Listener
from ..core.view_state import ViewState
from ..storage.repository import GroupRepository

logger = logging.getLogger(__name__)


class ActiveGroupsScreen:
    def __init__(self, repo: GroupRepository) -> None:
        self._repo = repo
        self._groups: ops.Groups = ()
        self._listeners: list[Listener] = []
        self._pending: set[asyncio.Task[bool]] = set()
        self._write_lock = asyncio.Lock()
        self._mounted = False

        self.view = ViewState()

    # ---- lifecycle ----

    async def mount(self) -> None:
        self._mounted = True
        loaded = await self._repo.load()
        if not self._mounted:
            logger.debug("Active screen unmounted during load; dropping result.")
            return
        self._groups = loaded
        logger.info("Active screen loaded %d groups.", len(loaded))
        self._notify()

    def unmount(self) -> None:
        self._mounted = False

    async def flush(self) -> None:
        """Wait for every scheduled write to finish."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    # ---- observers ----

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self._groups)
            except Exception:
                logger.exception("Groups listener failed.")

    # ---- state ----

    @property
    def groups(self) -> ops.Groups:
        return self._groups

    @property
    def active_groups(self) -> ops.Groups:
        return ops.active_groups(self._groups)

    def visible_tasks(self, group: Group) -> tuple[Task, ...]:
        return ops.filter_tasks(group.tasks, self.view.filter)

    def _commit(self, updated: ops.Groups) -> ops.Groups:
        if updated is self._groups:
            return updated
        self._groups = updated
        self._notify()
        self._schedule_save(updated)
        return updated

    def _schedule_save(self, snapshot: ops.Groups) -> None:
        task = asyncio.get_running_loop().create_task(self._save(snapshot))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _save(self, snapshot: ops.Groups) -> bool:
        # asyncio.Lock wakes waiters in FIFO order.
        async with self._write_lock:
            return await self._repo.save(snapshot)

    # ---- mutations ----

    def add_group(self, name: str) -> ops.Groups:
        return self._commit(ops.add_group(self._groups, name))

    def delete_group(self, group_id: str) -> ops.Groups:
        if self.view.edit.editing_group_id == group_id:
            self.view.edit.cancel()
        return self._commit(ops.delete_group(self._groups, group_id))

    def add_task(self, group_id: str, title: str) -> ops.Groups:
        return self._commit(ops.add_task(self._groups, group_id, title))

    def toggle_task(self, group_id: str, task_id: str) -> ops.Groups:
        return self._commit(ops.toggle_task(self._groups, group_id, task_id))

    def delete_task(self, group_id: str, task_id: str) -> ops.Groups:
        if self.view.edit.is_editing(task_id):
            self.view.edit.cancel()
        return self._commit(ops.delete_task(self._groups, group_id, task_id))

    def edit_task(self, group_id: str, task_id: str, new_title: str) -> ops.Groups:
        return self._commit(ops.edit_task(self._groups, group_id, task_id, new_title))

    # ---- view state ----

    def set_filter(self, mode: TaskFilter) -> None:
        self.view.filter = mode

    def start_edit(self, group_id: str, task_id: str) -> bool:
        group = ops.find_group(self._groups, group_id)
        task = ops.find_task(group, task_id) if group is not None else None
        if task is None:
            return False
        self.view.edit.start(group_id, task)
        return True

    def save_edit(self, text: str | None = None) -> ops.Groups:
        if text is not None:
            self.view.edit.update_text(text)
        return self._commit(self.view.edit.save(self._groups))

    def cancel_edit(self) -> None:
        self.view.edit.cancel()
