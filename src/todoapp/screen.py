"""Root screen: owns the task list state and builds the view tree.

Usage::

    screen = TodoScreen.create()
    screen.add_task("Buy milk")        # -> True, task 1 appended
    screen.toggle_task(1, True)        # task 1 moves to "Completed Items"
    tree = screen.render()             # Screen view tree with callbacks
    bundle = screen.save_instance_state()
    screen = TodoScreen.create(saved=bundle)
"""

from __future__ import annotations

from typing import Callable

from todoapp import log
from todoapp.config import Config
from todoapp.tasks import saved_state
from todoapp.tasks.model import Task, TaskListState
from todoapp.ui.controls import AddTaskControl, empty_state, task_row
from todoapp.ui.view import Heading, Screen, Section, Spacer, TaskRow

Listener = Callable[["TodoScreen"], None]


class TodoScreen:
    """State owner for the single to-do screen.

    Children receive data and callbacks only; every change to ``state``
    goes through :meth:`add_task`, :meth:`toggle_task` or
    :meth:`delete_task`.
    """

    def __init__(self, state: TaskListState | None = None, cfg: Config | None = None) -> None:
        self.cfg = cfg or Config()
        self._state = state or TaskListState()
        self._listeners: list[Listener] = []
        self._notices: list[str] = []
        # Pending input text is per-instance; it does not survive recreation.
        self.add_control = AddTaskControl(
            on_add=self.add_task,
            on_invalid=self.notify,
            label=self.cfg.input_label,
            button=self.cfg.add_label,
            validation_message=self.cfg.validation_message,
        )

    @classmethod
    def create(cls, saved: saved_state.Bundle | None = None, cfg: Config | None = None) -> TodoScreen:
        """Build a screen, restoring from ``saved`` when a bundle is given."""
        if saved is None:
            return cls(cfg=cfg)
        state = saved_state.restore(saved)
        log.debug(f"Restored {len(state.tasks)} task(s), next id {state.next_id}")
        return cls(state=state, cfg=cfg)

    # ── state ────────────────────────────────────────────────────

    @property
    def state(self) -> TaskListState:
        return self._state

    @property
    def tasks(self) -> tuple[Task, ...]:
        return self._state.tasks

    @property
    def next_id(self) -> int:
        return self._state.next_id

    def _set_state(self, new_state: TaskListState) -> None:
        if new_state is self._state:
            return
        self._state = new_state
        for listener in list(self._listeners):
            listener(self)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener(screen)`` after every state change. Returns an unsubscribe."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    # ── notices ──────────────────────────────────────────────────

    def notify(self, message: str) -> None:
        self._notices.append(message)

    def consume_notices(self) -> list[str]:
        """Return pending notices and forget them; each is shown once."""
        notices, self._notices = self._notices, []
        return notices

    # ── transitions ──────────────────────────────────────────────

    def add_task(self, text: str) -> bool:
        trimmed = text.strip()
        if not trimmed:
            self.notify(self.cfg.validation_message)
            log.debug("Rejected blank task name")
            return False
        task_id = self._state.next_id
        self._set_state(self._state.with_added(trimmed))
        log.debug(f"Task {task_id}: added")
        return True

    def toggle_task(self, task_id: int, completed: bool) -> None:
        task = self._state.get_task(task_id)
        if task is None:
            log.debug(f"Task {task_id}: toggle ignored (not found)")
            return
        self._set_state(self._state.with_toggled(task_id, completed))
        if task.completed != completed:
            before, after = ("completed", "active") if task.completed else ("active", "completed")
            log.debug(f"Task {task_id}: {before} -> {after}")

    def delete_task(self, task_id: int) -> None:
        if self._state.get_task(task_id) is None:
            log.debug(f"Task {task_id}: delete ignored (not found)")
            return
        self._set_state(self._state.with_deleted(task_id))
        log.debug(f"Task {task_id}: deleted")

    # ── lifecycle ────────────────────────────────────────────────

    def save_instance_state(self) -> saved_state.Bundle:
        return saved_state.save(self._state)

    # ── rendering ────────────────────────────────────────────────

    def _row(self, task: Task) -> TaskRow:
        return task_row(
            task,
            on_toggle=lambda checked, tid=task.id: self.toggle_task(tid, checked),
            on_delete=lambda tid=task.id: self.delete_task(tid),
        )

    def render(self) -> Screen:
        cfg = self.cfg
        active = self._state.active()
        completed = self._state.completed()

        children: list = [
            Heading(cfg.title, level=1),
            self.add_control.view(),
            Spacer(),
        ]
        # The empty state replaces the whole active section, heading included.
        if active:
            children.append(
                Section(Heading(cfg.items_heading, level=2), tuple(self._row(t) for t in active))
            )
        else:
            children.append(empty_state(cfg.empty_message))
        if completed:
            children.append(Spacer())
            children.append(
                Section(
                    Heading(cfg.completed_heading, level=2),
                    tuple(self._row(t) for t in completed),
                )
            )
        return Screen(children=tuple(children))
