"""CLI tests: options parse and a scripted session runs end to end."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from todoapp import __version__
from todoapp.cli import main


@pytest.fixture
def cli_runner():
    """Click CliRunner for invoking the CLI in-process."""
    return CliRunner()


def _session(cli_runner, lines: list[str], *args: str):
    return cli_runner.invoke(main, ["--no-alt-screen", *args], input="\n".join(lines) + "\n")


class TestCliHelpAndVersion:

    def test_help_long(self, cli_runner):
        r = cli_runner.invoke(main, ["--help"])
        assert r.exit_code == 0
        assert "TODO List" in r.output
        assert "--title" in r.output

    def test_help_short(self, cli_runner):
        r = cli_runner.invoke(main, ["-h"])
        assert r.exit_code == 0

    def test_version(self, cli_runner):
        r = cli_runner.invoke(main, ["--version"])
        assert r.exit_code == 0
        assert f"todoapp, version {__version__}" in r.output


class TestCliSession:

    def test_add_complete_and_exit(self, cli_runner):
        r = _session(cli_runner, ["add Buy milk", "add Walk dog", "done 1", "exit"], "--no-color")
        assert r.exit_code == 0, r.output
        assert "Completed Items" in r.output
        assert "Buy milk" in r.output
        assert r.output.rstrip().endswith("Goodbye.")

    def test_blank_add_shows_notice(self, cli_runner):
        r = _session(cli_runner, ["add    ", "exit"])
        assert r.exit_code == 0
        assert "Please enter a task name" in r.output

    def test_rotate_keeps_tasks(self, cli_runner):
        r = _session(cli_runner, ["add Keep me", "rotate", "exit"], "--no-color")
        assert r.exit_code == 0
        last_screen = r.output.rsplit("TODO List", 1)[1]
        assert "Keep me" in last_screen

    def test_custom_title(self, cli_runner):
        r = _session(cli_runner, ["exit"], "--title", "Groceries")
        assert r.exit_code == 0
        assert "Groceries" in r.output

    def test_blank_title_rejected(self, cli_runner):
        r = cli_runner.invoke(main, ["--title", "   "])
        assert r.exit_code != 0
        assert "Title cannot be blank" in r.output

    def test_eof_ends_session(self, cli_runner):
        r = cli_runner.invoke(main, ["--no-alt-screen"], input="add A\n")
        assert r.exit_code == 0
        assert "Interrupted. Goodbye." in r.output

    def test_verbose_logs_transitions(self, cli_runner):
        r = _session(cli_runner, ["add A", "done 1", "exit"], "-v", "--no-color")
        assert r.exit_code == 0
        assert "[DEBUG]" in r.output
        assert "Task 1: active -> completed" in r.output
