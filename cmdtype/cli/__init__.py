from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from cmdtype.configuration import ConfigurationError, load_config, resolve_binary
from cmdtype.logging import err_console
from cmdtype.runner import BinaryNotConfiguredError, Runner

from .common import COMMAND_CONTEXT, MODE_PRECEDENCE, print_version
from .help import show_root_help

app = typer.Typer(
    help="Display the type of the specified command.",
    context_settings=COMMAND_CONTEXT,
    rich_markup_mode="rich",
    add_completion=False,
)


def _selected_mode(**selectors: Optional[str]) -> Optional[tuple[str, str]]:
    for mode in MODE_PRECEDENCE:
        value = selectors.get(mode)
        if value:
            return mode, value
    return None


@app.command(context_settings=COMMAND_CONTEXT)
def main(
    ctx: typer.Context,
    type_: Optional[str] = typer.Option(
        None,
        "--type",
        "-t",
        metavar="COMMAND",
        help='Print "alias", "keyword", "function", "builtin", "file" or "unfound" for COMMAND.',
    ),
    path: Optional[str] = typer.Option(
        None,
        "--path",
        "-p",
        metavar="COMMAND",
        help="Print the absolute path of COMMAND when it is an external file.",
    ),
    all_: Optional[str] = typer.Option(
        None,
        "--all",
        "-a",
        metavar="COMMAND",
        help="Print every match for COMMAND on PATH, including aliases.",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Config file (default is $XDG_CONFIG_HOME/cmdtype/config.toml or ~/.cmdtype.toml).",
    ),
    version: bool = typer.Option(
        False,
        "-v",
        "--version",
        help="Show CLI version and exit.",
        is_eager=True,
    ),
    help_: bool = typer.Option(
        False,
        "--help",
        "-h",
        help="Show this message and exit.",
        is_eager=True,
    ),
) -> None:
    """Display the type of the specified command."""
    if version:
        print_version()
        raise typer.Exit()
    selected = _selected_mode(path=path, all=all_, type=type_)
    if help_ or selected is None:
        show_root_help(ctx)
        raise typer.Exit()

    try:
        binary = resolve_binary(load_config(config))
    except ConfigurationError as exc:
        err_console.print(f"[error]{escape(str(exc))}[/]")
        raise typer.Exit(code=1)

    runner = Runner(sys.stderr, sys.stdin, sys.stdout).bind(binary)
    mode, command = selected
    result = runner.exec(mode, command)
    if isinstance(result.error, BinaryNotConfiguredError):
        raise typer.Exit(code=1)


__all__ = ["app", "main"]
