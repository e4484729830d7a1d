"""Exception types raised by todoapp."""

from __future__ import annotations


class TodoError(Exception):
    """Base class for todoapp errors."""


class CommandError(TodoError):
    """Interactive input that cannot be turned into an action."""


class SavedStateError(TodoError):
    """A saved-state bundle that cannot be restored."""
