"""Paint a view tree onto a Rich console.

The only module that knows about Rich renderables; everything above it
works on :mod:`todoapp.ui.view` nodes.
"""

from __future__ import annotations

from collections.abc import Iterable

from rich.align import Align
from rich.console import Console, Group, RenderableType
from rich.table import Table
from rich.text import Text

from todoapp.ui.view import AddTaskBar, EmptyState, Heading, Node, Screen, Section, Spacer, TaskRow

TITLE_STYLE = "bold"
SECTION_STYLE = "bold underline"
INPUT_STYLE = "reverse"
BUTTON_STYLE = "bold white on blue"
ROW_STYLE = ""
ROW_EMPHASIS_STYLE = "on grey23"
ID_STYLE = "bold blue"
EMPTY_STYLE = "dim italic"
NOTICE_STYLE = "yellow"

CHECKED = "[x]"
UNCHECKED = "[ ]"
DELETE = "✕"


def _heading(node: Heading) -> Text:
    style = TITLE_STYLE if node.level <= 1 else SECTION_STYLE
    return Text(node.text, style=style)


def _add_bar(node: AddTaskBar) -> Text:
    field = node.value if node.value else " " * 12
    return Text.assemble(
        (f"{node.label}: ", ""),
        (f" {field} ", INPUT_STYLE),
        "  ",
        (f" {node.button} ", BUTTON_STYLE),
    )


def _rows_table(rows: Iterable[TaskRow]) -> Table:
    table = Table(show_header=False, box=None, expand=True, pad_edge=False, padding=(0, 1))
    table.add_column("id", justify="right", no_wrap=True, style=ID_STYLE)
    # Long text wraps; it is never truncated.
    table.add_column("text", ratio=1, overflow="fold")
    table.add_column("done", justify="center", no_wrap=True)
    table.add_column("delete", justify="center", no_wrap=True)
    for row in rows:
        table.add_row(
            Text(f"{row.task_id}."),
            Text(row.text),
            Text(CHECKED if row.checked else UNCHECKED),
            Text(DELETE),
            style=ROW_EMPHASIS_STYLE if row.emphasized else ROW_STYLE,
        )
    return table


def _section(node: Section) -> Group:
    parts: list[RenderableType] = [_heading(node.heading)]
    rows = [c for c in node.children if isinstance(c, TaskRow)]
    if rows:
        parts.append(_rows_table(rows))
    for child in node.children:
        if not isinstance(child, TaskRow):
            parts.append(to_renderable(child))
    return Group(*parts)


def to_renderable(node: Node | Screen) -> RenderableType:
    """Map one view node (or a whole screen) to a Rich renderable."""
    if isinstance(node, Screen):
        return Group(*(to_renderable(child) for child in node.children))
    if isinstance(node, Heading):
        return _heading(node)
    if isinstance(node, AddTaskBar):
        return _add_bar(node)
    if isinstance(node, Section):
        return _section(node)
    if isinstance(node, TaskRow):
        return _rows_table([node])
    if isinstance(node, EmptyState):
        return Align.center(Text(node.message, style=EMPTY_STYLE))
    if isinstance(node, Spacer):
        return Text("\n" * max(0, node.lines - 1))
    raise TypeError(f"Cannot paint {type(node).__name__}")


def paint(console: Console, tree: Screen, notices: Iterable[str] = (), *, clear: bool = False) -> None:
    """Draw ``tree`` on ``console``; ``notices`` are printed once underneath."""
    if clear:
        console.clear()
    console.print(to_renderable(tree))
    for notice in notices:
        console.print()
        console.print(Text(notice, style=NOTICE_STYLE))
