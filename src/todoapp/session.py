"""Interactive command loop: reads a line, presses the matching control, repaints.

Commands are mapped onto the callbacks of the freshly rendered view tree
(the add bar, a row's checkbox or delete action) so the loop drives the
app the same way a touch on the screen would.
"""

from __future__ import annotations

from typing import Callable

import click
from rich.console import Console
from rich.markup import escape

from todoapp import log
from todoapp.config import Config
from todoapp.errors import CommandError, TodoError
from todoapp.screen import TodoScreen
from todoapp.tasks.saved_state import SavedStateRegistry
from todoapp.ui.paint import paint

SCREEN_KEY = "todo_screen"
MAX_ID_DIGITS = 18

HELP_LINES: tuple[tuple[str, str], ...] = (
    ("add <text>", "Add a task (e.g. add buy milk)"),
    ("type <text>", "Put text in the input without submitting"),
    ("add", "Submit whatever is in the input"),
    ("done <id>", "Mark a task completed (alias: check)"),
    ("undo <id>", "Mark a task active again (alias: uncheck)"),
    ("toggle <id>", "Flip a task's checkbox"),
    ("rm <id>", "Delete a task (alias: delete)"),
    ("rotate", "Tear the screen down and restore it from saved state"),
    ("help", "Show this help"),
    ("exit", "Quit (tasks are not kept)"),
)


def _parse_id(tokens: list[str]) -> int:
    if len(tokens) != 2:
        raise CommandError(f"Usage: {tokens[0]} <id>")
    raw = tokens[1].rstrip(".")
    shown = tokens[1] if len(tokens[1]) <= 20 else tokens[1][:20] + "..."
    # ASCII only: str.isdigit also accepts digits int() rejects (e.g. superscripts).
    if not (raw.isascii() and raw.isdigit()) or len(raw) > MAX_ID_DIGITS:
        raise CommandError(f"Invalid id: {shown!r}")
    return int(raw)


class Session:
    """One interactive run. Owns the console, the saved-state registry and the current screen."""

    def __init__(
        self,
        cfg: Config | None = None,
        console: Console | None = None,
        registry: SavedStateRegistry | None = None,
    ) -> None:
        self.cfg = cfg or Config()
        self.console = console if console is not None else log.console
        self.registry = registry or SavedStateRegistry()
        self.screen = self._create_screen()
        # Messages shown after the next repaint, which may clear the terminal.
        self._deferred: list[tuple[Callable[[str], None], str]] = []
        self._show_help = False

    # ── lifecycle ────────────────────────────────────────────────

    def _create_screen(self) -> TodoScreen:
        screen = TodoScreen.create(saved=self.registry.consume(SCREEN_KEY), cfg=self.cfg)
        self.registry.register(SCREEN_KEY, screen.save_instance_state)
        self._unsubscribe = screen.subscribe(self._on_change)
        return screen

    def _on_change(self, screen: TodoScreen) -> None:
        log.debug(f"State changed: {len(screen.tasks)} task(s), next id {screen.next_id}")

    def rotate(self) -> None:
        """Simulate a configuration change: save, tear down, recreate, restore."""
        self.registry.save_all()
        self._unsubscribe()
        self.registry.unregister(SCREEN_KEY)
        self.screen = self._create_screen()
        log.debug("Screen recreated from saved state")

    # ── commands ─────────────────────────────────────────────────

    def handle(self, line: str) -> bool:
        """Apply one input line. Returns ``False`` when the session should end."""
        tokens = line.split()
        if not tokens:
            return True
        cmd = tokens[0].lower()
        rest = line.strip()[len(tokens[0]):].strip()
        tree = self.screen.render()

        if cmd in ("exit", "quit"):
            return False
        if cmd == "help":
            self._show_help = True
        elif cmd == "add":
            bar = tree.add_bar()
            if rest:
                bar.type(rest)
            bar.press()
        elif cmd == "type":
            tree.add_bar().type(rest)
        elif cmd in ("done", "check", "undo", "uncheck", "toggle", "rm", "delete"):
            task_id = _parse_id(tokens)
            row = tree.find_row(task_id)
            if row is None:
                self._deferred.append((log.warn, f"Task id {task_id} not found."))
            elif cmd in ("done", "check"):
                row.check(True)
            elif cmd in ("undo", "uncheck"):
                row.check(False)
            elif cmd == "toggle":
                row.toggle()
            else:
                row.delete()
        elif cmd == "rotate":
            self.rotate()
        else:
            raise CommandError(f"Unknown command {tokens[0]!r}. Type 'help' for instructions.")
        return True

    def _help(self) -> None:
        self.console.print("[bold]Commands:[/bold]")
        width = max(len(usage) for usage, _ in HELP_LINES)
        for usage, text in HELP_LINES:
            self.console.print(f"  {usage.ljust(width)}  {text}")

    # ── loop ─────────────────────────────────────────────────────

    def repaint(self) -> None:
        paint(
            self.console,
            self.screen.render(),
            self.screen.consume_notices(),
            clear=self.console.is_terminal,
        )
        if self._show_help:
            self._help()
            self._show_help = False
        for emit, msg in self._deferred:
            emit(escape(msg))
        self._deferred.clear()

    def run(self) -> None:
        use_alt = bool(self.cfg.alt_screen) and self.console.is_terminal
        if use_alt:
            self.console.set_alt_screen(True)
        exit_message = "Goodbye."
        try:
            while True:
                self.repaint()
                line = click.prompt("", default="", show_default=False, prompt_suffix=": ")
                try:
                    if not self.handle(line):
                        break
                except TodoError as exc:
                    self._deferred.append((log.error, str(exc)))
        except (click.Abort, KeyboardInterrupt, EOFError):
            exit_message = "Interrupted. Goodbye."
        finally:
            if use_alt:
                self.console.set_alt_screen(False)
        self.console.print(exit_message)
