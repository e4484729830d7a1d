"""Logging for todoapp via Rich.

Warnings and debug lines go to ``console`` (stdout, shared with the painted
screen); errors go to a stderr console. ``use_consoles`` swaps both, e.g.
for colorless output.
"""

from __future__ import annotations

from rich.console import Console

console = Console(highlight=False)
_err_console = Console(highlight=False, stderr=True)

_verbose = False


def set_verbose(enabled: bool) -> None:
    global _verbose
    _verbose = enabled


def use_consoles(out: Console, err: Console | None = None) -> None:
    """Route log output to other consoles (the session shares its own)."""
    global console, _err_console
    console = out
    _err_console = err if err is not None else out


def warn(msg: str) -> None:
    console.print(f"[yellow]\\[WARN][/yellow] {msg}")


def error(msg: str) -> None:
    _err_console.print(f"[red]\\[ERROR][/red] {msg}")


def debug(msg: str) -> None:
    if _verbose:
        console.print(f"[dim]\\[DEBUG] {msg}[/dim]")
