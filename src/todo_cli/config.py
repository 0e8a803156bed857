"""Configuration defaults and runtime options for todo-cli."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


VERSION = "0.1.0"

# Relative to the working directory of the invocation; not user-configurable.
TASKS_FILE = "tasks.json"

LIST_ID_WIDTH = 4
LIST_DESC_WIDTH = 30
LIST_CONTINUATION_INDENT = 5


@dataclass
class Config:
    """Runtime configuration built from the root command's flags."""

    tasks_file: str = TASKS_FILE
    verbose: bool = False

    @property
    def tasks_path(self) -> Path:
        return Path(self.tasks_file)
