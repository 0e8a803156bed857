"""todo-cli: a small personal task tracker backed by a JSON file."""

from todo_cli.config import VERSION

__version__ = VERSION
