"""Rich help screen for the cmdtype command.

Replaces Click's plain help output with themed tables for usage, options
(long and short forms side by side) and a few examples.
"""

from __future__ import annotations

from typing import Iterable, Sequence

import click
import typer
from rich.table import Table

from cmdtype import __description__
from cmdtype.logging import PALETTE, console

HELP_EXAMPLES = [
    ("cmdtype -t ls", "Print the category of ls (alias, builtin, file, ...)."),
    ("cmdtype -p ls", "Print the absolute path of ls when it is a file."),
    ("cmdtype -a ls", "List every match for ls, aliases included."),
]


def show_root_help(ctx: typer.Context) -> None:
    console.print(__description__)
    console.print()
    console.print("[section]Usage[/section]")
    console.print("  cmdtype [OPTIONS]\n")
    console.print("[section]Options[/section]")
    console.print(build_option_table(ctx))
    console.print()
    console.print("[section]Examples[/section]")
    console.print(build_examples_table())


def build_help_table(
    rows: Iterable[tuple[str, ...]],
    *,
    column_styles: Sequence[dict[str, object]] | None = None,
) -> Table:
    table = Table.grid(padding=(0, 3))
    styles = column_styles or (
        {"style": f"bold {PALETTE['green']}", "no_wrap": True},
        {"style": f"bold {PALETTE['purple']}", "no_wrap": True},
        {"style": PALETTE["fg"]},
    )
    for column in styles:
        table.add_column(**column)
    for row in rows:
        table.add_row(*row)
    return table


def build_option_table(ctx: typer.Context) -> Table:
    return build_help_table(option_help_rows(ctx))


def build_examples_table() -> Table:
    column_styles = (
        {"style": f"bold {PALETTE['cyan']}", "no_wrap": True},
        {"style": PALETTE["fg"]},
    )
    return build_help_table(HELP_EXAMPLES, column_styles=column_styles)


def option_help_rows(ctx: typer.Context):
    rows = []
    if ctx.command is None:
        return rows
    for param in ctx.command.params:
        if not isinstance(param, click.Option):
            continue
        name = primary_long_option(param)
        short_text = format_short_options(param)
        description = (param.help or "").strip()
        rows.append((name, short_text, description))
    return rows


def primary_long_option(param: "click.Option") -> str:
    for opt in param.opts:
        if opt.startswith("--"):
            return opt
    return param.opts[0] if param.opts else ""


def format_short_options(param: "click.Option") -> str:
    seen: list[str] = []
    for opt in list(param.opts) + list(param.secondary_opts):
        if not opt.startswith("-") or opt.startswith("--"):
            continue
        if opt not in seen:
            seen.append(opt)
    return ", ".join(seen)
