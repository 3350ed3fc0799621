"""Classification of ``type -a`` output lines into command categories.

Shells phrase the same answer differently (``ls is /bin/ls``,
``ls is aliased to `ls -G'``, ``cd is a shell builtin``), so each category
owns a few representative phrases and a line is matched by substring.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple


class Category(str, Enum):
    ALIAS = "alias"
    KEYWORD = "keyword"
    FUNCTION = "function"
    BUILTIN = "builtin"
    FILE = "file"
    UNFOUND = "unfound"

    def __str__(self) -> str:
        return self.value

    def equals(self, text: str) -> bool:
        """Case-insensitive comparison against the category name."""
        return text.casefold() == self.value.casefold()

    def matches(self, line: str) -> bool:
        if self.equals(line):
            return True
        folded = line.casefold()
        return any(phrase in folded for phrase in MATCH_PHRASES.get(self, ()))


# Checked in declaration order; the first hit wins.
MATCH_PHRASES: Dict[Category, Tuple[str, ...]] = {
    Category.ALIAS: ("alias",),
    Category.KEYWORD: ("word",),
    Category.FUNCTION: ("shell function", "function"),
    Category.BUILTIN: ("builtin",),
    Category.FILE: ("file", "is"),
    Category.UNFOUND: ("not", "found"),
}


def classify(line: str) -> Category:
    """Return the first category matching ``line``, or ``UNFOUND``."""
    for category in Category:
        if category.matches(line):
            return category
    return Category.UNFOUND
