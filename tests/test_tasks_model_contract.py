"""Contract tests for the task data model used by persistence and operations."""

from __future__ import annotations

from dataclasses import fields

from todo_cli.tasks.model import Task, TaskStore


def test_task_fields_match_persisted_keys() -> None:
    assert [f.name for f in fields(Task)] == ["id", "desc", "done"]


def test_task_defaults_to_not_done() -> None:
    assert Task(id=1, desc="x").done is False


def test_empty_store_starts_at_one() -> None:
    assert TaskStore().next_id() == 1


def test_next_id_uses_current_maximum(make_task, make_store) -> None:
    store = make_store(make_task(2), make_task(7), make_task(3))
    assert store.next_id() == 8


def test_stores_do_not_share_task_lists() -> None:
    a = TaskStore()
    b = TaskStore()
    a.tasks.append(Task(id=1))
    assert b.is_empty()


def test_get_task_and_ids(make_task, make_store) -> None:
    store = make_store(make_task(1), make_task(2, done=True), make_task(3))
    assert store.get_task(2).done is True
    assert store.get_task(9) is None
    assert store.ids() == [1, 2, 3]
