"""ANSI-aware text measurement for box layout.

Box geometry is computed on terminal cells, not code points: escape
sequences take no room, combining marks take none, and wide characters take
two cells.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
ELLIPSIS = "…"


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns and East Asian wide/fullwidth
    characters consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from ``text``."""
    return ANSI_ESCAPE_RE.sub("", text)


def printable_name(name: str) -> str:
    """Return ``name`` safe to encode as UTF-8.

    ``os.scandir`` maps undecodable filename bytes to lone surrogates; those
    become U+FFFD (any other lone surrogate becomes ``?``) so a strict
    UTF-8 stream can always write the result.
    """
    try:
        raw = name.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        raw = name.encode("utf-8", "replace")
    return raw.decode("utf-8", "replace")


def display_width(text: str) -> int:
    """Return the number of terminal cells ``text`` occupies once printed."""
    return sum(char_display_width(ch) for ch in strip_ansi(text))


def clip_to_width(text: str, max_cols: int) -> str:
    """Shorten plain ``text`` to at most ``max_cols`` cells, ending in an ellipsis.

    Text that already fits is returned unchanged. The ellipsis itself takes
    one cell, so the visible prefix is at most ``max_cols - 1`` cells wide.
    """
    if max_cols <= 0:
        return ""
    if display_width(text) <= max_cols:
        return text

    budget = max_cols - display_width(ELLIPSIS)
    out: list[str] = []
    col = 0
    for ch in text:
        w = char_display_width(ch)
        if col + w > budget:
            break
        out.append(ch)
        col += w
    return "".join(out) + ELLIPSIS


def center_text(text: str, width: int, fill: str = " ") -> str:
    """Center ``text`` within ``width`` cells; odd leftover goes to the right."""
    gap = max(0, width - display_width(text))
    left = gap // 2
    return f"{fill * left}{text}{fill * (gap - left)}"


__all__ = [
    "ANSI_ESCAPE_RE",
    "ELLIPSIS",
    "char_display_width",
    "strip_ansi",
    "printable_name",
    "display_width",
    "clip_to_width",
    "center_text",
]
