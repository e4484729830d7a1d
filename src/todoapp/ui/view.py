"""View tree nodes produced by ``render`` and consumed by the painter.

Nodes are immutable and carry the callbacks of the control that built
them; driving the app means invoking those callbacks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterator, Union


def _noop(*_args: object) -> None:
    return None


@dataclass(frozen=True)
class Heading:
    text: str
    level: int = 1


@dataclass(frozen=True)
class Spacer:
    lines: int = 1


@dataclass(frozen=True)
class AddTaskBar:
    label: str
    value: str
    button: str
    on_submit: Callable[[], None] = field(default=_noop, compare=False, repr=False)
    on_value_change: Callable[[str], None] = field(default=_noop, compare=False, repr=False)

    def type(self, text: str) -> None:
        self.on_value_change(text)

    def press(self) -> None:
        self.on_submit()


@dataclass(frozen=True)
class TaskRow:
    task_id: int
    text: str
    checked: bool
    emphasized: bool = False
    on_check: Callable[[bool], None] = field(default=_noop, compare=False, repr=False)
    on_delete: Callable[[], None] = field(default=_noop, compare=False, repr=False)

    def check(self, value: bool) -> None:
        self.on_check(value)

    def toggle(self) -> None:
        self.on_check(not self.checked)

    def delete(self) -> None:
        self.on_delete()


@dataclass(frozen=True)
class EmptyState:
    message: str


@dataclass(frozen=True)
class Section:
    heading: Heading
    children: tuple[Node, ...] = ()


Node = Union[Heading, Spacer, AddTaskBar, TaskRow, EmptyState, Section]


@dataclass(frozen=True)
class Screen:
    """Root of a rendered view tree."""

    children: tuple[Node, ...] = ()

    def walk(self) -> Iterator[Node]:
        stack = list(reversed(self.children))
        while stack:
            node = stack.pop()
            yield node
            if isinstance(node, Section):
                stack.extend(reversed(node.children))

    def rows(self) -> list[TaskRow]:
        return [n for n in self.walk() if isinstance(n, TaskRow)]

    def find_row(self, task_id: int) -> TaskRow | None:
        for row in self.rows():
            if row.task_id == task_id:
                return row
        return None

    def add_bar(self) -> AddTaskBar | None:
        for node in self.walk():
            if isinstance(node, AddTaskBar):
                return node
        return None

    def section(self, title: str) -> Section | None:
        for node in self.walk():
            if isinstance(node, Section) and node.heading.text == title:
                return node
        return None
