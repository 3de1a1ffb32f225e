# src/todo_groups/core/view_state.py

from __future__ import annotations

from dataclasses import dataclass, field

from .groups import Groups, edit_task
from .models import Task, TaskFilter


@dataclass(slots=True)
class EditSession:
    """
    Inline edit mode. At most one task is being edited at a time;
    starting a new edit replaces the previous target.
    """

    editing_group_id: str | None = None
    editing_id: str | None = None
    editing_text: str = ""

    @property
    def active(self) -> bool:
        return self.editing_id is not None

    def is_editing(self, task_id: str) -> bool:
        return self.editing_id is not None and self.editing_id == task_id

    def start(self, group_id: str, task: Task) -> None:
        self.editing_group_id = group_id
        self.editing_id = task.id
        self.editing_text = task.title

    def update_text(self, text: str) -> None:
        if self.active:
            self.editing_text = text

    def cancel(self) -> None:
        self.editing_group_id = None
        self.editing_id = None
        self.editing_text = ""

    def save(self, groups: Groups) -> Groups:
        """
        Apply the pending title. Blank text leaves both the collection and
        the session untouched.
        """
        if self.editing_group_id is None or self.editing_id is None:
            return groups
        if not self.editing_text.strip():
            return groups

        updated = edit_task(groups, self.editing_group_id, self.editing_id, self.editing_text)
        self.cancel()
        return updated


@dataclass(slots=True)
class ViewState:
    filter: TaskFilter = TaskFilter.ALL
    edit: EditSession = field(default_factory=EditSession)
