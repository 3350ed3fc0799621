from __future__ import annotations

from typing import IO, Optional

from rich.console import Console
from rich.theme import Theme


# One Dark-inspired palette tuned for Rich output
PALETTE = {
    "fg": "#abb2bf",
    "fg_muted": "#5c6370",
    "green": "#98c379",
    "yellow": "#e5c07b",
    "orange": "#d19a66",
    "blue": "#61afef",
    "cyan": "#56b6c2",
    "purple": "#c678dd",
    "red": "#e06c75",
}

THEME = Theme(
    {
        "text": PALETTE["fg"],
        "muted": PALETTE["fg_muted"],
        "accent": PALETTE["orange"],
        "ok": PALETTE["green"],
        "warn": PALETTE["yellow"],
        "error": f"bold {PALETTE['red']}",
        "info": PALETTE["blue"],
        "alias": PALETTE["purple"],
        "section": f"bold {PALETTE['orange']}",
    }
)

console = Console(theme=THEME, style=PALETTE["fg"])
err_console = Console(theme=THEME, stderr=True, soft_wrap=True)


def make_console(file: Optional[IO[str]] = None) -> Console:
    """Return a themed console bound to ``file`` (stdout when omitted).

    Highlighting and wrapping are off so logged paths and messages reach
    the stream unchanged.
    """
    return Console(file=file, theme=THEME, highlight=False, soft_wrap=True)
