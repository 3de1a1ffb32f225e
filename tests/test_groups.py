# tests/test_groups.py

from __future__ import annotations

import pytest

from todo_groups.core import groups as ops
from todo_groups.core.models import Group, Task, TaskFilter


def _group_with(*completed: bool, group_id: str = "g1") -> Group:
    tasks = tuple(
        Task(id=f"t{i}", title=f"task {i}", completed=c, created_at=i)
        for i, c in enumerate(completed)
    )
    return Group(id=group_id, name="Work", created_at=1, tasks=tasks)


def test_add_group_prepends_with_trimmed_name_and_no_tasks() -> None:
    groups = ops.add_group((), "  Home ", now_ms=100)
    groups = ops.add_group(groups, "Work", now_ms=200)

    assert [g.name for g in groups] == ["Work", "Home"]
    assert groups[0].tasks == ()
    assert groups[0].created_at == 200
    assert groups[0].id != groups[1].id


@pytest.mark.parametrize("name", ["", "   ", "\t\n"])
def test_blank_group_name_is_a_noop(name: str) -> None:
    before = (_group_with(False),)
    assert ops.add_group(before, name) is before


def test_add_task_prepends_incomplete_task() -> None:
    groups = ops.add_group((), "Work")
    gid = groups[0].id

    groups = ops.add_task(groups, gid, "first")
    groups = ops.add_task(groups, gid, " second ")

    tasks = groups[0].tasks
    assert [t.title for t in tasks] == ["second", "first"]
    assert all(t.completed is False for t in tasks)
    assert len({t.id for t in tasks}) == 2


@pytest.mark.parametrize("title", ["", "  "])
def test_blank_task_title_is_a_noop(title: str) -> None:
    before = (_group_with(False),)
    assert ops.add_task(before, "g1", title) is before


def test_add_task_to_missing_group_is_a_noop() -> None:
    before = (_group_with(False),)
    assert ops.add_task(before, "nope", "title") is before


def test_toggle_is_its_own_inverse() -> None:
    before = (_group_with(False, True),)

    once = ops.toggle_task(before, "g1", "t0")
    assert once[0].tasks[0].completed is True
    assert once[0].tasks[1] == before[0].tasks[1]

    twice = ops.toggle_task(once, "g1", "t0")
    assert twice == before


def test_toggle_unknown_ids_is_a_noop() -> None:
    before = (_group_with(False),)
    assert ops.toggle_task(before, "g1", "missing") is before
    assert ops.toggle_task(before, "missing", "t0") is before


def test_mutations_do_not_modify_input() -> None:
    before = (_group_with(False, False),)
    snapshot = before[0].tasks

    ops.toggle_task(before, "g1", "t0")
    ops.delete_task(before, "g1", "t1")
    ops.edit_task(before, "g1", "t0", "renamed")

    assert before[0].tasks is snapshot
    assert before[0].tasks[0].title == "task 0"


def test_delete_task_and_group() -> None:
    groups = (_group_with(False, False), _group_with(True, group_id="g2"))

    groups = ops.delete_task(groups, "g1", "t0")
    assert [t.id for t in groups[0].tasks] == ["t1"]
    assert ops.delete_task(groups, "g1", "t0") is groups

    groups = ops.delete_group(groups, "g1")
    assert [g.id for g in groups] == ["g2"]
    assert ops.delete_group(groups, "g1") is groups


def test_edit_task_replaces_trimmed_title_only_when_non_blank() -> None:
    before = (_group_with(False),)

    after = ops.edit_task(before, "g1", "t0", "  Buy oat milk ")
    assert after[0].tasks[0].title == "Buy oat milk"
    assert after[0].tasks[0].completed is False

    assert ops.edit_task(before, "g1", "t0", "   ") is before
    assert ops.edit_task(before, "g1", "missing", "x") is before


def test_empty_group_is_active_never_completed() -> None:
    g = Group(id="g", name="Empty")
    assert ops.is_group_active(g)
    assert not ops.is_group_completed(g)


@pytest.mark.parametrize(
    ("flags", "completed"),
    [
        ((True,), True),
        ((True, True, True), True),
        ((True, False), False),
        ((False,), False),
    ],
)
def test_classification(flags: tuple[bool, ...], completed: bool) -> None:
    g = _group_with(*flags)
    assert ops.is_group_completed(g) is completed
    assert ops.is_group_active(g) is not completed


def test_adding_incomplete_task_reactivates_completed_group() -> None:
    groups = (_group_with(True, True),)
    assert ops.completed_groups(groups) == groups

    groups = ops.add_task(groups, "g1", "one more")
    assert ops.completed_groups(groups) == ()
    assert ops.active_groups(groups) == groups


def test_remaining_count_and_filter() -> None:
    g = _group_with(False, True, False)

    assert ops.remaining_count(g) == 2
    assert [t.id for t in ops.filter_tasks(g.tasks, TaskFilter.ALL)] == ["t0", "t1", "t2"]
    assert [t.id for t in ops.filter_tasks(g.tasks, TaskFilter.ACTIVE)] == ["t0", "t2"]
    assert [t.id for t in ops.filter_tasks(g.tasks, TaskFilter.COMPLETED)] == ["t1"]
