from __future__ import annotations

"""
Terminal Styling.

ANSI escape sequences used by the CLI views. Palettes are immutable; the
plain palette is selected when output is not a terminal or NO_COLOR is set.
"""

import os
from dataclasses import dataclass
from typing import TextIO


@dataclass(frozen=True)
class Palette:
    reset: str = "\x1b[0m"
    bold: str = "\x1b[1m"
    dim: str = "\x1b[2m"
    red: str = "\x1b[31m"
    green: str = "\x1b[32m"
    yellow: str = "\x1b[33m"
    magenta: str = "\x1b[35m"
    cyan: str = "\x1b[36m"


ANSI = Palette()
PLAIN = Palette(**{name: "" for name in Palette.__dataclass_fields__})


def palette_for(stream: TextIO) -> Palette:
    """Pick ANSI colors for interactive terminals, plain text otherwise."""
    if "NO_COLOR" in os.environ:
        return PLAIN
    isatty = getattr(stream, "isatty", None)
    if isatty is not None and isatty():
        return ANSI
    return PLAIN


def pad(text: str, width: int) -> str:
    """Left-align text in a fixed-width column, truncating overflow."""
    return text[:width].ljust(width)
