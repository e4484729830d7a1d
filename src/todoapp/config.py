"""Configuration defaults, env vars, and runtime options for todoapp."""

from __future__ import annotations

import os
from dataclasses import dataclass


DEFAULT_TITLE = "TODO List"
DEFAULT_EMPTY_MESSAGE = "No active items. Add a task to get started!"
DEFAULT_VALIDATION_MESSAGE = "Please enter a task name"


def _truthy_env(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() not in {"0", "false", "no", "off", ""}


@dataclass
class Config:
    """Runtime configuration: screen copy plus terminal options."""

    # Screen copy
    title: str = DEFAULT_TITLE
    input_label: str = "Enter the task name"
    add_label: str = "Add"
    items_heading: str = "Items"
    completed_heading: str = "Completed Items"
    empty_message: str = DEFAULT_EMPTY_MESSAGE
    validation_message: str = DEFAULT_VALIDATION_MESSAGE

    # Terminal (None = resolve from environment)
    color: bool | None = None
    alt_screen: bool | None = None

    # Misc
    verbose: bool = False

    def __post_init__(self) -> None:
        if self.color is None:
            no_color = os.environ.get("NO_COLOR") is not None
            self.color = not no_color and not _truthy_env(
                os.environ.get("TODOAPP_NO_COLOR"), False
            )
        if self.alt_screen is None:
            self.alt_screen = _truthy_env(os.environ.get("TODOAPP_ALT_SCREEN"), True)
        if not self.title.strip():
            self.title = DEFAULT_TITLE
