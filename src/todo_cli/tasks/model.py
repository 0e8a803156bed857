"""Task and TaskStore data models shared by persistence, operations and the CLI."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Task:
    id: int
    desc: str = ""
    done: bool = False

    def to_dict(self) -> dict[str, object]:
        return {"id": self.id, "desc": self.desc, "done": self.done}


@dataclass
class TaskStore:
    """Ordered collection of tasks; insertion order is the canonical order.

    Ids are never stored as a separate counter. The next id is always derived
    from the current maximum, so ids freed by removal are not handed out again
    unless they were the highest ones.
    """

    tasks: list[Task] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.tasks)

    def is_empty(self) -> bool:
        return not self.tasks

    def next_id(self) -> int:
        return max(self.ids(), default=0) + 1

    def ids(self) -> list[int]:
        return [t.id for t in self.tasks]

    def get_task(self, task_id: int) -> Task | None:
        for t in self.tasks:
            if t.id == task_id:
                return t
        return None

    def to_list(self) -> list[dict[str, object]]:
        return [t.to_dict() for t in self.tasks]
