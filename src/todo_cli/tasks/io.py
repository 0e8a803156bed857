"""Load and save the task store as a pretty-printed JSON array."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from todo_cli.io_utils import read_text, write_text_atomic
from todo_cli.tasks.model import Task, TaskStore


@dataclass
class Loaded:
    store: TaskStore


@dataclass
class NotFound:
    path: Path


@dataclass
class ParseError:
    path: Path
    reason: str


@dataclass
class ReadError:
    path: Path
    reason: str


LoadResult = Loaded | NotFound | ParseError | ReadError


class _InvalidStructure(ValueError):
    pass


def _parse_task(index: int, raw: object) -> Task:
    if not isinstance(raw, dict):
        raise _InvalidStructure(f"entry {index} is not an object")
    for key in ("id", "desc", "done"):
        if key not in raw:
            raise _InvalidStructure(f"entry {index} is missing '{key}'")

    task_id, desc, done = raw["id"], raw["desc"], raw["done"]
    # bool is a subclass of int; reject it explicitly.
    if not isinstance(task_id, int) or isinstance(task_id, bool) or task_id < 0:
        raise _InvalidStructure(f"entry {index} has an invalid 'id'")
    if not isinstance(desc, str):
        raise _InvalidStructure(f"entry {index} has a non-string 'desc'")
    if not isinstance(done, bool):
        raise _InvalidStructure(f"entry {index} has a non-boolean 'done'")
    return Task(id=task_id, desc=desc, done=done)


def parse_task_store(text: str) -> TaskStore:
    """Parse JSON text into a TaskStore. Raises ValueError on malformed input."""
    data = json.loads(text)
    if not isinstance(data, list):
        raise _InvalidStructure("top level is not an array")

    tasks = [_parse_task(i, raw) for i, raw in enumerate(data)]
    seen: set[int] = set()
    for t in tasks:
        if t.id in seen:
            raise _InvalidStructure(f"duplicate task id {t.id}")
        seen.add(t.id)
    return TaskStore(tasks=tasks)


def dump_task_store(store: TaskStore) -> str:
    return json.dumps(store.to_list(), indent=2, ensure_ascii=False)


def load_task_store(path: Path) -> LoadResult:
    """Read the store at path.

    Returns ``NotFound`` when the file is absent and ``ParseError`` when it
    exists but does not hold a valid task array. Any other OS error (a
    directory in the way, no read permission) comes back as ``ReadError``.
    """
    try:
        text = read_text(path)
    except FileNotFoundError:
        return NotFound(path)
    except UnicodeDecodeError as exc:
        return ParseError(path, f"not valid UTF-8 ({exc.reason})")
    except OSError as exc:
        return ReadError(path, exc.strerror or str(exc))

    try:
        store = parse_task_store(text)
    except ValueError as exc:
        return ParseError(path, str(exc))
    return Loaded(store)


def save_task_store(path: Path, store: TaskStore) -> None:
    """Overwrite path with the whole store."""
    write_text_atomic(path, dump_task_store(store))
