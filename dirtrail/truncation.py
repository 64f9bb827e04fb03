"""Name truncation policies for directory boxes.

A policy is a tagged variant over three primitive strategies:

- ``NONE`` leaves every name untouched;
- ``BY_FILE_NAME_LENGTH`` shortens names whose length is an upper statistical
  outlier within their own directory;
- ``CONSTANT`` shortens every name longer than a fixed width.

The two automatic modes (``statistical`` and ``fit_all_boxes_in_one_row``) are
alternate constructors that pick a strategy. Boxes only ever call
``context_for`` and ``apply``, so rendering never depends on which policy is
active.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from .ansi import clip_to_width
from .stats import upper_fence

logger = logging.getLogger(__name__)

MIN_TRUNCATED_WIDTH = 4
BOX_CHROME_WIDTH = 4


class TruncationStrategy(Enum):
    NONE = "none"
    BY_FILE_NAME_LENGTH = "by_file_name_length"
    CONSTANT = "constant"


class TruncationMode(Enum):
    """User-facing automatic truncation modes."""

    NONE = "none"
    STATISTICAL = "statistical"
    FIT_ROW = "fit-row"


@dataclass(frozen=True)
class TruncationContext:
    """Per-box truncation limit; ``None`` means names are left as-is."""

    limit: int | None = None
    truncate_title: bool = False


@dataclass(frozen=True)
class TruncationPolicy:
    strategy: TruncationStrategy = TruncationStrategy.NONE
    constant_width: int | None = None

    @classmethod
    def none(cls) -> TruncationPolicy:
        return cls(TruncationStrategy.NONE)

    @classmethod
    def constant(cls, width: int) -> TruncationPolicy:
        return cls(TruncationStrategy.CONSTANT, constant_width=max(MIN_TRUNCATED_WIDTH, int(width)))

    @classmethod
    def statistical(cls) -> TruncationPolicy:
        """Automatic mode: truncate upper outliers of each box's name lengths."""
        return cls(TruncationStrategy.BY_FILE_NAME_LENGTH)

    @classmethod
    def fit_all_boxes_in_one_row(cls, box_count: int, terminal_width: int, spacing: int) -> TruncationPolicy:
        """Automatic mode: one constant width so ``box_count`` boxes share a row.

        The row must stay strictly narrower than ``terminal_width``; each box
        adds ``BOX_CHROME_WIDTH`` cells of border and padding around its names.
        """
        count = max(1, box_count)
        usable = terminal_width - 1 - max(0, spacing) * (count - 1)
        width = usable // count - BOX_CHROME_WIDTH
        logger.debug(f"Fit-row truncation: {count} boxes in {terminal_width} columns -> width {width}")
        return cls.constant(width)

    @classmethod
    def for_mode(
        cls,
        mode: TruncationMode,
        box_count: int = 1,
        terminal_width: int = 80,
        spacing: int = 1,
    ) -> TruncationPolicy:
        if mode is TruncationMode.STATISTICAL:
            return cls.statistical()
        if mode is TruncationMode.FIT_ROW:
            return cls.fit_all_boxes_in_one_row(box_count, terminal_width, spacing)
        return cls.none()

    def context_for(self, name_lengths: Sequence[int]) -> TruncationContext:
        """Compute the truncation limit for one box from its raw name lengths."""
        if self.strategy is TruncationStrategy.CONSTANT:
            return TruncationContext(limit=self.constant_width, truncate_title=True)
        if self.strategy is TruncationStrategy.BY_FILE_NAME_LENGTH:
            fence = upper_fence(name_lengths)
            if fence is None or not any(length > fence for length in name_lengths):
                return TruncationContext()
            return TruncationContext(limit=max(MIN_TRUNCATED_WIDTH, math.floor(fence)))
        return TruncationContext()

    def apply(self, name: str, context: TruncationContext) -> str:
        """Return the display text for ``name`` under ``context``."""
        if context.limit is None:
            return name
        return clip_to_width(name, context.limit)

    def apply_title(self, title: str, context: TruncationContext) -> str:
        if not context.truncate_title:
            return title
        return self.apply(title, context)


__all__ = [
    "MIN_TRUNCATED_WIDTH",
    "BOX_CHROME_WIDTH",
    "TruncationStrategy",
    "TruncationMode",
    "TruncationContext",
    "TruncationPolicy",
]
