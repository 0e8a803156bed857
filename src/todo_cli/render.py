"""Fixed-column text rendering for ``todo list``."""

from __future__ import annotations

from todo_cli.config import LIST_CONTINUATION_INDENT, LIST_DESC_WIDTH, LIST_ID_WIDTH
from todo_cli.tasks.model import Task

DONE_MARKER = ":)"
NOT_DONE_MARKER = ":("


def wrap_description(
    desc: str,
    width: int = LIST_DESC_WIDTH,
    indent: int = LIST_CONTINUATION_INDENT,
) -> str:
    """Hard-wrap desc every ``width`` characters.

    Continuation lines are indented by ``indent`` spaces and the last segment
    is right-padded to ``width`` so the status marker lands in a fixed column.
    Breaks happen mid-word; no attempt is made to honor word boundaries.
    """
    segments: list[str] = []
    rest = desc
    while len(rest) > width:
        segments.append(rest[:width])
        rest = rest[width:]
    segments.append(rest.ljust(width))
    return ("\n" + " " * indent).join(segments)


def status_marker(task: Task) -> str:
    return DONE_MARKER if task.done else NOT_DONE_MARKER


def format_task(task: Task) -> str:
    return f"{task.id:<{LIST_ID_WIDTH}} {wrap_description(task.desc)} {status_marker(task)}"
