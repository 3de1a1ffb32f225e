# src/todo_groups/core/models.py

from __future__ import annotations

import secrets
import time
from collections.abc import Collection, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class TaskFilter(StrEnum):
    """Which tasks of a group are shown."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, raw: str | None) -> TaskFilter | None:
        if not raw:
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


def now_ms() -> int:
    return int(time.time() * 1000)


def make_id(existing: Collection[str] = ()) -> str:
    """
    Opaque id: millisecond timestamp followed by random hex digits.
    Regenerated on the (unlikely) collision with an id in `existing`.
    """
    while True:
        candidate = f"{now_ms()}{secrets.token_hex(6)}"
        if candidate not in existing:
            return candidate


def _str_field(rec: Mapping[str, Any], key: str) -> str:
    val = rec.get(key)
    return val if isinstance(val, str) else ""


def _ts_field(rec: Mapping[str, Any], key: str) -> int:
    val = rec.get(key)
    # bool is an int subclass; a stored True is not a timestamp.
    if isinstance(val, bool) or not isinstance(val, (int, float)):
        return 0
    return int(val)


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    title: str
    completed: bool = False
    created_at: int = 0

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "completed": self.completed,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_record(cls, rec: Any) -> Task | None:
        if not isinstance(rec, Mapping):
            return None
        task_id = _str_field(rec, "id")
        if not task_id:
            return None
        return cls(
            id=task_id,
            title=_str_field(rec, "title"),
            completed=rec.get("completed") is True,
            created_at=_ts_field(rec, "createdAt"),
        )


@dataclass(frozen=True, slots=True)
class Group:
    id: str
    name: str
    created_at: int = 0
    # Newest first.
    tasks: tuple[Task, ...] = field(default_factory=tuple)

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "createdAt": self.created_at,
            "tasks": [t.to_record() for t in self.tasks],
        }

    @classmethod
    def from_record(cls, rec: Any) -> Group | None:
        if not isinstance(rec, Mapping):
            return None
        group_id = _str_field(rec, "id")
        if not group_id:
            return None

        raw_tasks = rec.get("tasks")
        tasks: list[Task] = []
        seen: set[str] = set()
        if isinstance(raw_tasks, list):
            for raw in raw_tasks:
                task = Task.from_record(raw)
                if task is None or task.id in seen:
                    continue
                seen.add(task.id)
                tasks.append(task)

        return cls(
            id=group_id,
            name=_str_field(rec, "name"),
            created_at=_ts_field(rec, "createdAt"),
            tasks=tuple(tasks),
        )
