"""Yes/no confirmation gating destructive operations."""

from __future__ import annotations

from enum import Enum
from typing import Protocol

import click


class Answer(str, Enum):
    YES = "yes"
    NO = "no"
    INVALID = "invalid"


_YES = frozenset({"y", "yes"})
_NO = frozenset({"n", "no", ""})


class Confirmer(Protocol):
    def ask(self, question: str) -> str:
        """Show question and return one raw line of user input."""
        ...


class ClickConfirmer:
    """Read the answer from the terminal. An empty line is a valid answer.

    End of input (or Ctrl-C) at the prompt reads as an empty line, which
    declines, so work already done in this invocation still gets saved.
    """

    def ask(self, question: str) -> str:
        try:
            return click.prompt(question, default="", show_default=False, prompt_suffix=" ")
        except click.Abort:
            click.echo()
            return ""


def parse_answer(raw: str) -> Answer:
    """Map a raw line to an Answer. Case-insensitive; empty declines."""
    value = raw.strip().lower()
    if value in _YES:
        return Answer.YES
    if value in _NO:
        return Answer.NO
    return Answer.INVALID


def confirm(confirmer: Confirmer, question: str) -> Answer:
    return parse_answer(confirmer.ask(question))
