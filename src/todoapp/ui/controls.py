"""Stateless controls (task row, empty state) and the add-task input.

Controls never see the task list: they get data plus callbacks and emit
intents upward.
"""

from __future__ import annotations

from typing import Callable

from todoapp.tasks.model import Task
from todoapp.ui.view import AddTaskBar, EmptyState, TaskRow


def task_row(
    task: Task,
    on_toggle: Callable[[bool], None],
    on_delete: Callable[[], None],
) -> TaskRow:
    return TaskRow(
        task_id=task.id,
        text=task.text,
        checked=task.completed,
        emphasized=task.completed,
        on_check=on_toggle,
        on_delete=on_delete,
    )


def empty_state(message: str) -> EmptyState:
    return EmptyState(message=message)


class AddTaskControl:
    """Single-line input plus an Add action.

    Holds only the pending input text. ``submit`` trims it; blank input
    goes to ``on_invalid`` and is left in place, anything else goes to
    ``on_add`` and the input is cleared afterwards.
    """

    def __init__(
        self,
        on_add: Callable[[str], object],
        on_invalid: Callable[[str], None],
        *,
        label: str = "Enter the task name",
        button: str = "Add",
        validation_message: str = "Please enter a task name",
    ) -> None:
        self.on_add = on_add
        self.on_invalid = on_invalid
        self.label = label
        self.button = button
        self.validation_message = validation_message
        self.value = ""

    def on_value_change(self, text: str) -> None:
        self.value = text

    def submit(self) -> bool:
        trimmed = self.value.strip()
        if not trimmed:
            self.on_invalid(self.validation_message)
            return False
        self.on_add(trimmed)
        self.value = ""
        return True

    def view(self) -> AddTaskBar:
        return AddTaskBar(
            label=self.label,
            value=self.value,
            button=self.button,
            on_submit=self.submit,
            on_value_change=self.on_value_change,
        )
