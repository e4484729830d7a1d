"""Save/restore of task list state across a configuration change.

The bundle is a plain dict (``{"tasks": [...], "next_id": n}``) held in
process memory by :class:`SavedStateRegistry`; nothing touches disk.
"""

from __future__ import annotations

from typing import Any, Callable

from todoapp import log
from todoapp.errors import SavedStateError
from todoapp.tasks.model import Task, TaskListState

Bundle = dict[str, Any]


def save(state: TaskListState) -> Bundle:
    return {
        "tasks": [
            {"id": t.id, "text": t.text, "completed": t.completed}
            for t in state.tasks
        ],
        "next_id": state.next_id,
    }


def restore(bundle: Bundle) -> TaskListState:
    """Rebuild a state from a bundle produced by :func:`save`.

    Raises :class:`SavedStateError` when the bundle is malformed. A counter
    that fell behind the stored ids is raised to ``max(id) + 1``.
    """
    if not isinstance(bundle, dict):
        raise SavedStateError(f"Saved state must be a mapping, got {type(bundle).__name__}")

    raw_tasks = bundle.get("tasks", [])
    if not isinstance(raw_tasks, list):
        raise SavedStateError("Saved state 'tasks' must be a list")

    next_id = bundle.get("next_id", 1)
    if isinstance(next_id, bool) or not isinstance(next_id, int) or next_id < 1:
        raise SavedStateError(f"Saved state 'next_id' must be a positive integer, got {next_id!r}")

    tasks: list[Task] = []
    seen: set[int] = set()
    for i, raw in enumerate(raw_tasks):
        if not isinstance(raw, dict):
            raise SavedStateError(f"Saved task #{i} is not a mapping")
        tid = raw.get("id")
        text = raw.get("text")
        completed = raw.get("completed", False)
        if isinstance(tid, bool) or not isinstance(tid, int):
            raise SavedStateError(f"Saved task #{i} has invalid id {tid!r}")
        if tid in seen:
            raise SavedStateError(f"Saved state has duplicate task id {tid}")
        if not isinstance(text, str) or not text.strip():
            raise SavedStateError(f"Saved task {tid} has empty text")
        if not isinstance(completed, bool):
            raise SavedStateError(f"Saved task {tid} has invalid completed flag {completed!r}")
        seen.add(tid)
        tasks.append(Task(id=tid, text=text.strip(), completed=completed))

    if seen and next_id <= max(seen):
        log.debug(f"Saved next_id {next_id} behind stored ids; using {max(seen) + 1}")
        next_id = max(seen) + 1

    return TaskListState(tasks=tuple(tasks), next_id=next_id)


class SavedStateRegistry:
    """Process-local keyed store for bundles that must outlive one screen.

    Usage::

        registry.register("todo", screen.save_instance_state)
        registry.save_all()                  # before teardown
        bundle = registry.consume("todo")    # when the screen is recreated
    """

    def __init__(self) -> None:
        self._providers: dict[str, Callable[[], Bundle]] = {}
        self._saved: dict[str, Bundle] = {}

    def register(self, key: str, provider: Callable[[], Bundle]) -> None:
        self._providers[key] = provider

    def unregister(self, key: str) -> None:
        self._providers.pop(key, None)

    def save_all(self) -> None:
        for key, provider in self._providers.items():
            self._saved[key] = provider()
            log.debug(f"Saved state for {key!r}")

    def consume(self, key: str) -> Bundle | None:
        """Return and forget the bundle saved under ``key``."""
        return self._saved.pop(key, None)

    def has_saved(self, key: str) -> bool:
        return key in self._saved
