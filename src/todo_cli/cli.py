"""todo CLI: add, list, toggle, remove and purge tasks in ./tasks.json.

Installed as ``todo`` console_script via pipx / pip.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import contextmanager

import click
from rich.markup import escape

from todo_cli import __version__, log
from todo_cli.config import Config
from todo_cli.confirm import ClickConfirmer
from todo_cli.render import format_task
from todo_cli.tasks import ops
from todo_cli.tasks.io import (
    Loaded,
    NotFound,
    ParseError,
    ReadError,
    load_task_store,
    save_task_store,
)
from todo_cli.tasks.model import TaskStore


# ── Custom Click group that handles short command aliases ─────────────

class TodoGroup(click.Group):
    """Resolve ``a``, ``ls``, ``dn``, ``rm`` and ``pg`` to their commands."""

    _ALIASES: dict[str, str] = {
        "a": "add",
        "ls": "list",
        "dn": "done",
        "rm": "remove",
        "pg": "purge",
    }

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        return super().get_command(ctx, self._ALIASES.get(cmd_name, cmd_name))

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        # Report the canonical name so ctx.invoked_subcommand never holds an alias.
        _, cmd, rest = super().resolve_command(ctx, args)
        return (cmd.name if cmd else None), cmd, rest


CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@contextmanager
def _task_session(cfg: Config) -> Iterator[TaskStore]:
    """Load the store, hand it to the command, then save it back.

    A file that exists but cannot be read or parsed ends the process with
    status 1 before any command runs. A missing file starts an empty store.
    """
    path = cfg.tasks_path
    match load_task_store(path):
        case Loaded(store=loaded):
            store = loaded
            log.debug(f"Loaded {len(store)} task(s) from {path}")
        case NotFound():
            log.info(f"Could not find {path.name}, starting fresh.")
            store = TaskStore()
        case ParseError(reason=reason):
            log.error(f"Could not parse {path.name}: {escape(reason)}")
            sys.exit(1)
        case ReadError(reason=reason):
            log.error(f"Could not read {path.name}: {escape(reason)}")
            sys.exit(1)

    yield store

    save_task_store(path, store)
    log.debug(f"Saved {len(store)} task(s) to {path}")


@click.group(cls=TodoGroup, context_settings=CONTEXT_SETTINGS)
@click.option("-v", "--verbose", is_flag=True, help="Show debug output")
@click.version_option(__version__, prog_name="todo")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """todo: a simple command-line to-do list.

    Tasks are kept in tasks.json in the current directory.

    \b
    EXAMPLES:
      todo add "buy milk" "call mom"   # Add two tasks
      todo ls -s                       # List, open tasks first
      todo dn 1 2                      # Toggle tasks 1 and 2
      todo rm 3                        # Remove task 3 (asks first)
      todo pg                          # Remove everything (asks first)
    """
    log.set_verbose(verbose)
    ctx.obj = Config(verbose=verbose)


@main.command()
@click.argument("descs", nargs=-1, required=True, metavar="DESC...")
@click.pass_obj
def add(cfg: Config, descs: tuple[str, ...]) -> None:
    """Add task(s). Quote a description that contains spaces. Alias: a."""
    with _task_session(cfg) as store:
        ops.add_tasks(store, descs)


@main.command("list")
@click.option("--sort", "-s", "sort_by_status", is_flag=True, help="Show open tasks before done ones")
@click.pass_obj
def list_tasks(cfg: Config, sort_by_status: bool) -> None:
    """List all tasks. Alias: ls."""
    with _task_session(cfg) as store:
        if store.is_empty():
            log.info("No tasks yet.")
            return
        for task in ops.sorted_view(store, sort_by_status):
            log.plain(format_task(task))


@main.command()
@click.argument("ids", nargs=-1, required=True, type=int, metavar="ID...")
@click.pass_obj
def done(cfg: Config, ids: tuple[int, ...]) -> None:
    """Mark task(s) as done, or back to not done. Alias: dn."""
    with _task_session(cfg) as store:
        for task_id in ids:
            ops.toggle_done(store, task_id)


@main.command()
@click.argument("ids", nargs=-1, required=True, type=int, metavar="ID...")
@click.pass_obj
def remove(cfg: Config, ids: tuple[int, ...]) -> None:
    """Remove task(s), asking once per id. Alias: rm."""
    confirmer = ClickConfirmer()
    with _task_session(cfg) as store:
        for task_id in ids:
            ops.remove_task(store, task_id, confirmer)


@main.command()
@click.pass_obj
def purge(cfg: Config) -> None:
    """Remove all tasks after confirmation. Alias: pg."""
    with _task_session(cfg) as store:
        ops.purge(store, ClickConfirmer())
