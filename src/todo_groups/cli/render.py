# src/todo_groups/cli/render.py

"""Plain-text rendering of the two tabs."""

from __future__ import annotations

from ..core import groups as ops
from ..core.models import Group
from ..core.state import TAB_ARCHIVE, AppState
from ..screens.active import ActiveGroupsScreen
from ..screens.archive import ArchiveScreen

DEFAULT_PREVIEW_LIMIT = 6


def render_group_card(
    index: int,
    group: Group,
    screen: ActiveGroupsScreen,
    preview_limit: int = DEFAULT_PREVIEW_LIMIT,
) -> list[str]:
    lines = [f"{index}. {group.name}", f"   {ops.remaining_count(group)} remaining"]

    tasks = screen.visible_tasks(group)
    for n, task in enumerate(tasks[:preview_limit], start=1):
        box = "[x]" if task.completed else "[ ]"
        mark = "*" if screen.view.edit.is_editing(task.id) else " "
        lines.append(f"  {mark}{n}. {box} {task.title}")

    if len(tasks) > preview_limit:
        lines.append(f"   Showing {preview_limit} of {len(tasks)} tasks…")
    return lines


def render_active(screen: ActiveGroupsScreen, preview_limit: int = DEFAULT_PREVIEW_LIMIT) -> str:
    lines = ["Active Groups"]
    if screen.view.filter != "all":
        lines[0] += f" (filter: {screen.view.filter})"

    groups = screen.active_groups
    if not groups:
        lines.append("No active groups yet.")
        return "\n".join(lines)

    for i, group in enumerate(groups, start=1):
        lines.extend(render_group_card(i, group, screen, preview_limit))
    return "\n".join(lines)


def render_archive(screen: ArchiveScreen) -> str:
    lines = ["Completed Groups"]

    groups = screen.completed_groups
    if not groups:
        lines.append("No completed groups yet.")
        return "\n".join(lines)

    for i, group in enumerate(groups, start=1):
        lines.append(f"{i}. {group.name}")
        lines.append(f"   {len(group.tasks)} tasks")
    return "\n".join(lines)


def render_current(state: AppState) -> str:
    if state.navigator.current == TAB_ARCHIVE:
        return render_archive(state.archive)
    limit = int(getattr(state.settings, "task_preview_limit", DEFAULT_PREVIEW_LIMIT))
    return render_active(state.active, limit)
