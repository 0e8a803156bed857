"""Tests for todo_cli.log: tagged status lines, stderr for errors, verbatim rows."""

from __future__ import annotations

from todo_cli import log


def test_status_lines_carry_their_tag(capsys):
    log.info("No tasks yet.")
    log.success("Added task x.")
    log.warn("Task 3 not found.")
    out = capsys.readouterr().out.splitlines()
    assert out == ["[INFO] No tasks yet.", "[OK] Added task x.", "[WARN] Task 3 not found."]


def test_error_goes_to_stderr(capsys):
    log.error("Could not parse tasks.json: boom")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[ERROR] Could not parse tasks.json: boom" in captured.err


def test_debug_only_when_verbose(capsys):
    log.debug("hidden")
    assert capsys.readouterr().out == ""
    log.set_verbose(True)
    log.debug("shown")
    assert "[DEBUG] shown" in capsys.readouterr().out


def test_long_status_line_is_not_folded(capsys):
    log.success("Added task " + "x" * 200 + ".")
    assert len(capsys.readouterr().out.splitlines()) == 1


def test_plain_keeps_brackets_and_trailing_spaces(capsys):
    log.plain("1    [bold]x[/bold]      :(")
    assert capsys.readouterr().out == "1    [bold]x[/bold]      :(\n"
