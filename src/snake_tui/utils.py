"""
Terminal text utilities.

Provides:
- visible_width(): terminal column width of a string (ANSI-aware, wcwidth)
- pad_to_width(): right-pad a glyph to a fixed cell width
- colorize(): wrap text in an SGR colour sequence
- cursor_to(): absolute cursor positioning sequence
"""
from __future__ import annotations

import re

from wcwidth import wcswidth, wcwidth

# Strip ANSI escape sequences for width calculation
_ANSI_SGR_RE = re.compile(r"\x1b\[[0-9;?]*[mGKHJA-Za-z]")
_ANSI_OSC_RE = re.compile(r"\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)")

RESET = "\x1b[0m"

# Bright foreground colours
COLORS: dict[str, str] = {
    "red": "\x1b[91m",
    "green": "\x1b[92m",
    "yellow": "\x1b[93m",
    "cyan": "\x1b[96m",
    "white": "\x1b[97m",
}


def strip_ansi(text: str) -> str:
    return _ANSI_OSC_RE.sub("", _ANSI_SGR_RE.sub("", text))


def visible_width(text: str) -> int:
    """Number of terminal columns *text* occupies once escapes are stripped."""
    plain = strip_ansi(text)
    if not plain:
        return 0
    if plain.isascii() and plain.isprintable():
        return len(plain)
    width = wcswidth(plain)
    if width >= 0:
        return width
    # wcswidth gives up on control characters; count what it can measure.
    return sum(max(0, wcwidth(ch)) for ch in plain)


def pad_to_width(text: str, width: int) -> str:
    pad = width - visible_width(text)
    return text + " " * pad if pad > 0 else text


def colorize(text: str, color: str | None) -> str:
    if not color:
        return text
    return f"{COLORS[color]}{text}{RESET}"


def cursor_to(row: int, col: int) -> str:
    """CUP sequence for a zero-based (row, col)."""
    return f"\x1b[{row + 1};{col + 1}H"
