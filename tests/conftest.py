"""Shared fixtures for todoapp tests.

Consoles in tests:
- Use the ``record_console`` fixture to capture what the painter draws.
- Log output is routed back to fresh consoles after every test.
"""

from __future__ import annotations

import pytest
from rich.console import Console

from todoapp import log
from todoapp.config import Config
from todoapp.screen import TodoScreen
from todoapp.tasks.model import Task, TaskListState


@pytest.fixture(autouse=True)
def _isolate_log(monkeypatch: pytest.MonkeyPatch) -> None:
    """Undo any console rerouting / verbosity a test (or the CLI) applies."""
    monkeypatch.setattr(log, "console", log.console)
    monkeypatch.setattr(log, "_err_console", log._err_console)
    monkeypatch.setattr(log, "_verbose", False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("TODOAPP_NO_COLOR", raising=False)
    monkeypatch.delenv("TODOAPP_ALT_SCREEN", raising=False)


def _make_task(id: int, text: str = "", completed: bool = False) -> Task:
    return Task(id=id, text=text or f"Task {id}", completed=completed)


def _make_state(tasks: list[Task], next_id: int | None = None) -> TaskListState:
    if next_id is None:
        next_id = max((t.id for t in tasks), default=0) + 1
    return TaskListState(tasks=tuple(tasks), next_id=next_id)


@pytest.fixture
def make_task():
    """Factory fixture that creates Task instances."""
    return _make_task


@pytest.fixture
def make_state():
    """Factory fixture that creates TaskListState instances."""
    return _make_state


@pytest.fixture
def cfg() -> Config:
    return Config(color=False, alt_screen=False)


@pytest.fixture
def screen(cfg: Config) -> TodoScreen:
    return TodoScreen.create(cfg=cfg)


@pytest.fixture
def record_console() -> Console:
    """Wide, colorless, recording console for asserting on painted text."""
    return Console(record=True, width=100, color_system=None, force_terminal=False, highlight=False)
