"""Shared fixtures for todo-cli tests.

File handling in tests:
- Use the ``workdir`` fixture for anything that touches tasks.json; it moves
  the working directory into tmp_path so the real file is never read or written.
- Use ``scripted_confirmer`` instead of a terminal for remove/purge prompts.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from todo_cli import log
from todo_cli.tasks.model import Task, TaskStore


class ScriptedConfirmer:
    """Confirmer that replays canned answers and records the questions asked."""

    def __init__(self, answers: list[str]) -> None:
        self._answers = list(answers)
        self.questions: list[str] = []

    def ask(self, question: str) -> str:
        self.questions.append(question)
        if not self._answers:
            raise AssertionError(f"Unexpected prompt: {question}")
        return self._answers.pop(0)


def _make_task(id: int, desc: str = "", done: bool = False) -> Task:
    return Task(id=id, desc=desc or f"Task {id}", done=done)


def _make_store(*tasks: Task) -> TaskStore:
    return TaskStore(tasks=list(tasks))


@pytest.fixture(autouse=True)
def _reset_verbose():
    log.set_verbose(False)
    yield
    log.set_verbose(False)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def make_task():
    """Factory fixture that creates Task instances."""
    return _make_task


@pytest.fixture
def make_store():
    """Factory fixture that creates TaskStore instances."""
    return _make_store


@pytest.fixture
def scripted_confirmer():
    """Factory fixture: ``scripted_confirmer(["y", "n"])``."""
    return ScriptedConfirmer
