"""User-facing output for todo: tagged status lines via Rich, rows verbatim.

Status lines (``[OK] Added task ...``, ``[WARN] Task 3 not found.``) go to
stdout; errors go to stderr so a failed load never mixes with task output.
Callers escape any user text (task descriptions) with ``rich.markup.escape``.
"""

from __future__ import annotations

import click
from rich.console import Console

# soft_wrap keeps long task descriptions on one line instead of folding them
# at the console width.
console = Console(highlight=False, soft_wrap=True)
_err_console = Console(highlight=False, soft_wrap=True, stderr=True)

_verbose = False


def set_verbose(enabled: bool) -> None:
    global _verbose
    _verbose = enabled


def _tagged(out: Console, tag: str, style: str, msg: str) -> None:
    out.print(f"[{style}]\\[{tag}][/{style}] {msg}")


def info(msg: str) -> None:
    """Neutral notice: empty list, fresh start, task reopened."""
    _tagged(console, "INFO", "blue", msg)


def success(msg: str) -> None:
    """A task was added, completed or removed."""
    _tagged(console, "OK", "green", msg)


def warn(msg: str) -> None:
    """Per-item problem that does not stop the command (unknown id, bad answer)."""
    _tagged(console, "WARN", "yellow", msg)


def error(msg: str) -> None:
    """Fatal problem with the data file."""
    _tagged(_err_console, "ERROR", "red", msg)


def debug(msg: str) -> None:
    if _verbose:
        console.print(f"[dim]\\[DEBUG] {msg}[/dim]")


def plain(text: str) -> None:
    """Write a list row untouched: no markup, highlighting or wrapping."""
    click.echo(text)
