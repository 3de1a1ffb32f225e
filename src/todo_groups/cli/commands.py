# src/todo_groups/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from ..core import groups as ops
from ..core.models import Group, Task, TaskFilter
from ..core.state import TAB_ACTIVE, AppState
from .render import render_current

CommandHandler = Callable[[AppState, list[str]], Awaitable[str]]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    async def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return await handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- reference resolution ----


def _match_id(items, ref: str):
    exact = [x for x in items if x.id == ref]
    if exact:
        return exact[0]
    prefixed = [x for x in items if x.id.startswith(ref)]
    # Ambiguous prefixes resolve to nothing.
    return prefixed[0] if len(prefixed) == 1 else None


# Ids start with a 13-digit timestamp, so a digit-only prefix is still an id.
# Only short digit strings are positions on screen.
MAX_POSITION_DIGITS = 4


def _resolve(ref: str, shown, items):
    if ref.isdigit() and len(ref) <= MAX_POSITION_DIGITS:
        idx = int(ref) - 1
        return shown[idx] if 0 <= idx < len(shown) else None
    return _match_id(items, ref)


def resolve_group(state: AppState, ref: str) -> Group | None:
    """1-based card number on the active tab, or a group id (prefix)."""
    return _resolve(ref, state.active.active_groups, state.active.groups)


def resolve_task(state: AppState, group: Group, ref: str) -> Task | None:
    """1-based number among the group's visible tasks, or a task id (prefix)."""
    return _resolve(ref, state.active.visible_tasks(group), group.tasks)


def _resolve_pair(state: AppState, args: list[str]) -> tuple[Group, Task] | str:
    if len(args) < 2:
        return "Need a group and a task, e.g. 1 2."
    group = resolve_group(state, args[0])
    if group is None:
        return f"No such group: {args[0]}"
    task = resolve_task(state, group, args[1])
    if task is None:
        return f"No such task in {group.name}: {args[1]}"
    return group, task


# ---- handlers ----


async def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


async def cmd_status(state: AppState, args: list[str]) -> str:
    groups = state.active.groups
    edit = state.active.view.edit
    editing = f"task {edit.editing_id}" if edit.active else "none"
    backend = getattr(state.settings, "storage_backend", "?")
    lines = [
        "Status:",
        f"  Tab: {state.navigator.current}",
        f"  Filter: {state.active.view.filter}",
        f"  Groups: {len(groups)} "
        f"(active {len(ops.active_groups(groups))}, completed {len(ops.completed_groups(groups))})",
        f"  Editing: {editing}",
        f"  Storage: {backend} key={state.repo.key}",
    ]
    if groups:
        lines.append("Ids:")
    for g in groups:
        lines.append(f"  {g.id}  {g.name}")
        lines.extend(f"    {t.id}  {t.title}" for t in g.tasks)
    return "\n".join(lines)


async def cmd_show(state: AppState, args: list[str]) -> str:
    return render_current(state)


async def cmd_tab(state: AppState, args: list[str]) -> str:
    """
    /tab           -> show current tab
    /tab archive   -> switch (re-reads the archive)
    """
    names = state.navigator.names
    if not args:
        return f"Current tab: {state.navigator.current}. Tabs: {', '.join(names)}."

    name = args[0].lower()
    if name not in names:
        return f"Unknown tab: {name}. Tabs: {', '.join(names)}."

    await state.navigator.switch(name)
    return render_current(state)


async def cmd_group(state: AppState, args: list[str]) -> str:
    state.active.add_group(" ".join(args))
    return render_current(state)


async def cmd_rmgroup(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /rmgroup <group>"
    group = resolve_group(state, args[0])
    if group is None:
        return f"No such group: {args[0]}"
    state.active.delete_group(group.id)
    return render_current(state)


async def cmd_add(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /add <group> <title>"
    group = resolve_group(state, args[0])
    if group is None:
        return f"No such group: {args[0]}"
    state.active.add_task(group.id, " ".join(args[1:]))
    return render_current(state)


async def cmd_toggle(state: AppState, args: list[str]) -> str:
    pair = _resolve_pair(state, args)
    if isinstance(pair, str):
        return pair
    group, task = pair
    state.active.toggle_task(group.id, task.id)
    return render_current(state)


async def cmd_rm(state: AppState, args: list[str]) -> str:
    pair = _resolve_pair(state, args)
    if isinstance(pair, str):
        return pair
    group, task = pair
    state.active.delete_task(group.id, task.id)
    return render_current(state)


async def cmd_edit(state: AppState, args: list[str]) -> str:
    pair = _resolve_pair(state, args)
    if isinstance(pair, str):
        return pair
    group, task = pair
    state.active.start_edit(group.id, task.id)
    return f"Editing: {task.title}\nUse /save <new title> or /cancel."


async def cmd_save(state: AppState, args: list[str]) -> str:
    if not state.active.view.edit.active:
        return "Nothing is being edited. Use /edit <group> <task> first."
    state.active.save_edit(" ".join(args) if args else None)
    return render_current(state)


async def cmd_cancel(state: AppState, args: list[str]) -> str:
    state.active.cancel_edit()
    return render_current(state)


async def cmd_filter(state: AppState, args: list[str]) -> str:
    """
    /filter                    -> show current filter
    /filter all|active|completed
    """
    if not args:
        return f"Filter is {state.active.view.filter}. Use /filter all|active|completed."
    mode = TaskFilter.parse(args[0])
    if mode is None:
        return "Usage: /filter all|active|completed."
    state.active.set_filter(mode)
    return render_current(state)


async def add_group_from_text(state: AppState, text: str) -> str:
    """Bare (non-command) input on the active tab creates a group."""
    if state.navigator.current != TAB_ACTIVE:
        return "Switch to the active tab (/tab active) to add groups."
    state.active.add_group(text)
    return render_current(state)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show tab, filter, counts and storage.")
registry.register("show", cmd_show, help_text="Re-render the current tab.", aliases=["ls"])
registry.register("tab", cmd_tab, help_text="Switch tabs: /tab active | /tab archive.")
registry.register("group", cmd_group, help_text="Add a group: /group <name>.")
registry.register("rmgroup", cmd_rmgroup, help_text="Delete a group and its tasks: /rmgroup <group>.")
registry.register("add", cmd_add, help_text="Add a task: /add <group> <title>.")
registry.register("toggle", cmd_toggle, help_text="Complete/uncomplete: /toggle <group> <task>.")
registry.register("rm", cmd_rm, help_text="Delete a task: /rm <group> <task>.")
registry.register("edit", cmd_edit, help_text="Start editing a task: /edit <group> <task>.")
registry.register("save", cmd_save, help_text="Save the edit: /save [new title].")
registry.register("cancel", cmd_cancel, help_text="Cancel the edit.")
registry.register("filter", cmd_filter, help_text="Task filter: /filter all | active | completed.")
