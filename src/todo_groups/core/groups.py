# src/todo_groups/core/groups.py

"""
Pure operations over the group collection.

Every mutation takes the current collection and returns a new one; inputs
are never modified. Invalid input (blank names/titles, unknown ids) returns
the collection unchanged, the very same object, so callers can detect a
no-op with `is`.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from .models import Group, Task, TaskFilter, make_id, now_ms as _now_ms

Groups = tuple[Group, ...]


# ---- lookups ----


def find_group(groups: Groups, group_id: str) -> Group | None:
    for g in groups:
        if g.id == group_id:
            return g
    return None


def find_task(group: Group, task_id: str) -> Task | None:
    for t in group.tasks:
        if t.id == task_id:
            return t
    return None


def _replace_group(groups: Groups, updated: Group) -> Groups:
    return tuple(updated if g.id == updated.id else g for g in groups)


# ---- groups ----


def add_group(groups: Groups, name: str, *, now_ms: int | None = None) -> Groups:
    clean = (name or "").strip()
    if not clean:
        return groups

    group = Group(
        id=make_id({g.id for g in groups}),
        name=clean,
        created_at=_now_ms() if now_ms is None else now_ms,
        tasks=(),
    )
    return (group, *groups)


def delete_group(groups: Groups, group_id: str) -> Groups:
    if find_group(groups, group_id) is None:
        return groups
    return tuple(g for g in groups if g.id != group_id)


# ---- tasks ----


def add_task(groups: Groups, group_id: str, title: str, *, now_ms: int | None = None) -> Groups:
    clean = (title or "").strip()
    if not clean:
        return groups

    group = find_group(groups, group_id)
    if group is None:
        return groups

    task = Task(
        id=make_id({t.id for t in group.tasks}),
        title=clean,
        completed=False,
        created_at=_now_ms() if now_ms is None else now_ms,
    )
    return _replace_group(groups, replace(group, tasks=(task, *group.tasks)))


def toggle_task(groups: Groups, group_id: str, task_id: str) -> Groups:
    group = find_group(groups, group_id)
    if group is None or find_task(group, task_id) is None:
        return groups

    tasks = tuple(
        replace(t, completed=not t.completed) if t.id == task_id else t for t in group.tasks
    )
    return _replace_group(groups, replace(group, tasks=tasks))


def delete_task(groups: Groups, group_id: str, task_id: str) -> Groups:
    group = find_group(groups, group_id)
    if group is None or find_task(group, task_id) is None:
        return groups

    tasks = tuple(t for t in group.tasks if t.id != task_id)
    return _replace_group(groups, replace(group, tasks=tasks))


def edit_task(groups: Groups, group_id: str, task_id: str, new_title: str) -> Groups:
    clean = (new_title or "").strip()
    if not clean:
        return groups

    group = find_group(groups, group_id)
    if group is None:
        return groups
    task = find_task(group, task_id)
    if task is None or task.title == clean:
        return groups

    tasks = tuple(replace(t, title=clean) if t.id == task_id else t for t in group.tasks)
    return _replace_group(groups, replace(group, tasks=tasks))


# ---- classification (derived, never stored) ----


def is_group_active(group: Group) -> bool:
    # Groups with no tasks yet still count as active.
    return not group.tasks or any(not t.completed for t in group.tasks)


def is_group_completed(group: Group) -> bool:
    return bool(group.tasks) and all(t.completed for t in group.tasks)


def active_groups(groups: Iterable[Group]) -> Groups:
    return tuple(g for g in groups if is_group_active(g))


def completed_groups(groups: Iterable[Group]) -> Groups:
    return tuple(g for g in groups if is_group_completed(g))


def remaining_count(group: Group) -> int:
    return sum(1 for t in group.tasks if not t.completed)


def filter_tasks(tasks: Iterable[Task], mode: TaskFilter = TaskFilter.ALL) -> tuple[Task, ...]:
    if mode == TaskFilter.ACTIVE:
        return tuple(t for t in tasks if not t.completed)
    if mode == TaskFilter.COMPLETED:
        return tuple(t for t in tasks if t.completed)
    return tuple(tasks)
