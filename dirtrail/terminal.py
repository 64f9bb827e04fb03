"""Terminal dimension lookup with a recoverable failure path."""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

from .errors import TerminalSizeUnavailable

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_WIDTH = 80


def terminal_dimensions(stream: TextIO | None = None) -> tuple[int, int]:
    """Return ``(columns, rows)`` of the terminal attached to ``stream``.

    Raises ``TerminalSizeUnavailable`` when ``stream`` is not a terminal or the
    host reports no usable size.
    """
    target = stream if stream is not None else sys.stdout
    try:
        size = os.get_terminal_size(target.fileno())
    except (AttributeError, ValueError, OSError) as exc:
        raise TerminalSizeUnavailable(f"terminal size unavailable: {exc}") from exc
    if size.columns <= 0:
        raise TerminalSizeUnavailable("terminal reported zero columns")
    return size.columns, size.lines


def resolve_terminal_width(
    override: int | None = None,
    fallback: int = DEFAULT_FALLBACK_WIDTH,
    stream: TextIO | None = None,
) -> int:
    """Pick the render width: explicit override, then terminal, then ``fallback``."""
    if override is not None:
        return override
    try:
        columns, _rows = terminal_dimensions(stream)
    except TerminalSizeUnavailable as exc:
        logger.debug(f"{exc}; using fallback width {fallback}")
        return fallback
    return columns


__all__ = [
    "DEFAULT_FALLBACK_WIDTH",
    "terminal_dimensions",
    "resolve_terminal_width",
]
