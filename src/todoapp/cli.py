"""todoapp CLI.

Installed as ``todoapp`` console_script; also runnable as ``python -m todoapp``.
"""

from __future__ import annotations

import click
from rich.console import Console

from todoapp import __version__
from todoapp.config import Config


CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


def _validate_title(ctx: click.Context, param: click.Parameter, value: str | None) -> str | None:
    if value is not None and not value.strip():
        raise click.BadParameter("Title cannot be blank.", param_hint="--title")
    return value


@click.command(context_settings=CONTEXT_SETTINGS)
@click.option("--title", default=None, callback=_validate_title, help="Screen title (default: TODO List)")
@click.option("--no-color", is_flag=True, help="Disable colored output (also: NO_COLOR, TODOAPP_NO_COLOR)")
@click.option(
    "--alt-screen/--no-alt-screen",
    default=None,
    help="Draw in the terminal's alternate screen (default on; env TODOAPP_ALT_SCREEN)",
)
@click.option("-v", "--verbose", is_flag=True, help="Show debug output")
@click.version_option(__version__, prog_name="todoapp")
def main(title: str | None, no_color: bool, alt_screen: bool | None, verbose: bool) -> None:
    """TODO List: add tasks, tick them off, delete them.

    Tasks live only as long as the session; nothing is written to disk.

    \b
    EXAMPLES:
      todoapp                      # Start with an empty list
      todoapp --title "Groceries"  # Custom heading
      todoapp --no-alt-screen -v   # Keep output in scrollback, show debug lines

    \b
    COMMANDS (inside the app):
      add <text>   done <id>   undo <id>   rm <id>   rotate   help   exit
    """
    from todoapp import log as tlog
    from todoapp.session import Session

    tlog.set_verbose(verbose)

    cfg = Config(
        color=False if no_color else None,
        alt_screen=alt_screen,
        verbose=verbose,
    )
    if title is not None:
        cfg.title = title.strip()

    if not cfg.color:
        tlog.use_consoles(
            Console(highlight=False, no_color=True),
            Console(highlight=False, no_color=True, stderr=True),
        )

    tlog.debug(f"Starting todoapp {__version__} (alt_screen={cfg.alt_screen}, color={cfg.color})")
    Session(cfg).run()
