from __future__ import annotations

from cmdtype import __version__
from cmdtype.logging import console

# -h/--help is declared on the command itself.
COMMAND_CONTEXT = {"help_option_names": []}

# Order in which mode selectors are honoured when several are given.
MODE_PRECEDENCE = ("path", "all", "type")


def print_version() -> None:
    console.print(f"[bold]cmdtype[/bold] [accent]v{__version__}[/]")
