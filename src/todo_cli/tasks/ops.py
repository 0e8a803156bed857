"""Operations applied to an in-memory TaskStore during one invocation.

Each operation reports its outcome through ``todo_cli.log`` and returns a
value describing what happened. None of them raise for expected conditions
such as unknown ids or declined confirmations.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from rich.markup import escape

from todo_cli import log
from todo_cli.confirm import Answer, Confirmer, confirm
from todo_cli.tasks.model import Task, TaskStore


class Outcome(str, Enum):
    REMOVED = "removed"
    DECLINED = "declined"
    INVALID = "invalid"
    NOT_FOUND = "not_found"


def add_task(store: TaskStore, desc: str) -> Task:
    task = Task(id=store.next_id(), desc=desc, done=False)
    store.tasks.append(task)
    log.success(f"Added task {escape(desc)}.")
    log.debug(f"Assigned id {task.id}")
    return task


def add_tasks(store: TaskStore, descs: Iterable[str]) -> list[Task]:
    """Add each description in order; each sees the ids assigned before it."""
    return [add_task(store, d) for d in descs]


def toggle_done(store: TaskStore, task_id: int) -> bool | None:
    """Flip the done flag. Returns the new value, or None if the id is unknown."""
    task = store.get_task(task_id)
    if task is None:
        log.warn(f"Task {task_id} not found.")
        return None

    task.done = not task.done
    if task.done:
        log.success(f"Marked task {task_id} as done.")
    else:
        log.info(f"Marked task {task_id} as not done.")
    return task.done


def remove_task(store: TaskStore, task_id: int, confirmer: Confirmer) -> Outcome:
    """Remove task_id after confirmation. Unknown ids are reported without prompting."""
    if store.get_task(task_id) is None:
        log.warn(f"Task {task_id} not found.")
        return Outcome.NOT_FOUND

    match confirm(confirmer, f"Are you sure you want to delete task {task_id}? (y/N)"):
        case Answer.YES:
            store.tasks = [t for t in store.tasks if t.id != task_id]
            log.success(f"Task {task_id} removed.")
            return Outcome.REMOVED
        case Answer.NO:
            log.debug(f"Kept task {task_id}")
            return Outcome.DECLINED
        case Answer.INVALID:
            log.warn("Invalid input.")
            return Outcome.INVALID


def purge(store: TaskStore, confirmer: Confirmer) -> Outcome:
    """Clear the whole store after a single confirmation."""
    match confirm(confirmer, "Are you sure you want to delete all of your tasks? (y/N)"):
        case Answer.YES:
            count = len(store)
            store.tasks.clear()
            log.success("All tasks removed.")
            log.debug(f"Purged {count} task(s)")
            return Outcome.REMOVED
        case Answer.NO:
            return Outcome.DECLINED
        case Answer.INVALID:
            log.warn("Invalid input.")
            return Outcome.INVALID


def sorted_view(store: TaskStore, sort_by_status: bool = False) -> list[Task]:
    """Return a new list ordered by id, or by (done, id) when sort_by_status.

    The store itself is left untouched.
    """
    if sort_by_status:
        return sorted(store.tasks, key=lambda t: (t.done, t.id))
    return sorted(store.tasks, key=lambda t: t.id)
