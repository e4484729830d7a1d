"""Tests for todoapp.ui.controls — the add-task input and stateless controls."""

from __future__ import annotations

from todoapp.tasks.model import Task
from todoapp.ui.controls import AddTaskControl, empty_state, task_row
from todoapp.ui.view import AddTaskBar, EmptyState


def _control():
    added: list[str] = []
    invalid: list[str] = []
    ctl = AddTaskControl(on_add=added.append, on_invalid=invalid.append)
    return ctl, added, invalid


class TestAddTaskControl:

    def test_submit_trims_calls_parent_and_clears(self):
        ctl, added, invalid = _control()
        ctl.on_value_change("  Buy milk  ")
        assert ctl.submit() is True
        assert added == ["Buy milk"]
        assert invalid == []
        assert ctl.value == ""

    def test_blank_submit_signals_and_keeps_input(self):
        ctl, added, invalid = _control()
        ctl.on_value_change("    ")
        assert ctl.submit() is False
        assert added == []
        assert invalid == ["Please enter a task name"]
        assert ctl.value == "    "

    def test_view_reflects_pending_text(self):
        ctl, _, _ = _control()
        ctl.on_value_change("draft")
        bar = ctl.view()
        assert isinstance(bar, AddTaskBar)
        assert (bar.label, bar.value, bar.button) == ("Enter the task name", "draft", "Add")

    def test_view_callbacks_reach_control(self):
        ctl, added, _ = _control()
        bar = ctl.view()
        bar.type("From bar")
        bar.press()
        assert added == ["From bar"]


class TestTaskRow:

    def test_row_from_active_task(self):
        row = task_row(Task(3, "Read"), on_toggle=lambda v: None, on_delete=lambda: None)
        assert (row.task_id, row.text, row.checked, row.emphasized) == (3, "Read", False, False)

    def test_completed_task_is_emphasized(self):
        row = task_row(Task(3, "Read", True), on_toggle=lambda v: None, on_delete=lambda: None)
        assert row.checked is True
        assert row.emphasized is True

    def test_checkbox_and_delete_emit_intents(self):
        toggles: list[bool] = []
        deletes: list[None] = []
        row = task_row(Task(1, "A"), on_toggle=toggles.append, on_delete=lambda: deletes.append(None))
        row.check(True)
        row.toggle()
        row.delete()
        assert toggles == [True, True]
        assert deletes == [None]


def test_empty_state():
    assert empty_state("Nothing yet") == EmptyState("Nothing yet")
