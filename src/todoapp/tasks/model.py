"""Task and TaskListState data models shared by the screen and its controls."""

from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class Task:
    id: int
    text: str
    completed: bool = False


@dataclass(frozen=True)
class TaskListState:
    """Ordered tasks plus the id counter.

    Every ``with_*`` method returns a new state; the receiver is never
    changed. Ids in ``tasks`` are unique and strictly below ``next_id``.
    """

    tasks: tuple[Task, ...] = field(default_factory=tuple)
    next_id: int = 1

    # ── queries ──────────────────────────────────────────────────

    def get_task(self, task_id: int) -> Task | None:
        for t in self.tasks:
            if t.id == task_id:
                return t
        return None

    def active(self) -> list[Task]:
        return [t for t in self.tasks if not t.completed]

    def completed(self) -> list[Task]:
        return [t for t in self.tasks if t.completed]

    # ── transitions ──────────────────────────────────────────────

    def with_added(self, text: str) -> TaskListState:
        """Append a task with the next id. ``text`` must already be trimmed."""
        task = Task(id=self.next_id, text=text)
        return TaskListState(tasks=self.tasks + (task,), next_id=self.next_id + 1)

    def with_toggled(self, task_id: int, completed: bool) -> TaskListState:
        task = self.get_task(task_id)
        if task is None or task.completed == completed:
            return self
        tasks = tuple(
            replace(t, completed=completed) if t.id == task_id else t
            for t in self.tasks
        )
        return replace(self, tasks=tasks)

    def with_deleted(self, task_id: int) -> TaskListState:
        if self.get_task(task_id) is None:
            return self
        return replace(self, tasks=tuple(t for t in self.tasks if t.id != task_id))
