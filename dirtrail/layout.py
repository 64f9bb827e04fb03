"""Greedy row wrapping and line-by-line rendering of a breadcrumb chain.

Boxes are packed left to right into rows strictly narrower than the terminal.
Inter-box spacing is only charged between boxes, never after the last box of
a row, and a row always admits at least one box so an oversized box cannot
stall the layout.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TextIO

from .box import DirectoryBox
from .ui_theme import UITheme

logger = logging.getLogger(__name__)

DEFAULT_BOX_SPACING = 1
DEFAULT_ROW_SPACING = 1


@dataclass(frozen=True)
class LayoutRow:
    """Half-open ``[start, end)`` range of chain indices sharing one row."""

    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    def indices(self) -> range:
        return range(self.start, self.end)


def plan_rows(widths: Sequence[int], terminal_width: int, spacing: int = DEFAULT_BOX_SPACING) -> Iterator[LayoutRow]:
    """Yield rows packing boxes of the given total widths.

    A box joins the current row when the row stays narrower than
    ``terminal_width`` either with trailing spacing (more may follow) or
    without it (this box closes the row). The first box of a row is always
    admitted.
    """
    count = len(widths)
    cursor = 0
    while cursor < count:
        start = cursor
        running = 0
        while cursor < count:
            candidate = running + widths[cursor] + spacing
            fits_with_more = candidate < terminal_width
            fits_as_last = candidate - spacing < terminal_width
            if cursor > start and not (fits_with_more or fits_as_last):
                break
            running = candidate
            cursor += 1
        yield LayoutRow(start, cursor)


def _row_line(
    boxes: Sequence[DirectoryBox],
    row: LayoutRow,
    line: int,
    spacing: int,
    spacing_char: str,
    row_spacing_char: str,
    theme: UITheme | None,
) -> str:
    parts: list[str] = []
    for index in row.indices():
        box = boxes[index]
        if line < box.total_height():
            parts.append(box.render_row(line, theme))
        else:
            parts.append(row_spacing_char * box.total_width())
        if index < row.end - 1:
            parts.append(spacing_char * spacing)
    return "".join(parts)


def render_rows(
    boxes: Sequence[DirectoryBox],
    rows: Iterator[LayoutRow] | Sequence[LayoutRow],
    stream: TextIO,
    spacing: int = DEFAULT_BOX_SPACING,
    row_spacing: int = DEFAULT_ROW_SPACING,
    spacing_char: str = " ",
    row_spacing_char: str = " ",
    theme: UITheme | None = None,
) -> None:
    """Write every row of ``boxes`` to ``stream``.

    Each row emits ``max(total_height) + row_spacing`` lines; boxes shorter
    than the row are padded with ``row_spacing_char``.
    """
    for row in rows:
        row_height = max(boxes[index].total_height() for index in row.indices())
        logger.debug(f"Row [{row.start}, {row.end}) height {row_height}")
        for line in range(row_height + row_spacing):
            stream.write(_row_line(boxes, row, line, spacing, spacing_char, row_spacing_char, theme))
            stream.write("\n")


def render_chain(
    boxes: Sequence[DirectoryBox],
    stream: TextIO,
    terminal_width: int,
    spacing: int = DEFAULT_BOX_SPACING,
    row_spacing: int = DEFAULT_ROW_SPACING,
    theme: UITheme | None = None,
) -> None:
    """Lay out ``boxes`` for ``terminal_width`` columns and write them to ``stream``."""
    rows = plan_rows([box.total_width() for box in boxes], terminal_width, spacing)
    render_rows(boxes, rows, stream, spacing=spacing, row_spacing=row_spacing, theme=theme)


__all__ = [
    "DEFAULT_BOX_SPACING",
    "DEFAULT_ROW_SPACING",
    "LayoutRow",
    "plan_rows",
    "render_rows",
    "render_chain",
]
