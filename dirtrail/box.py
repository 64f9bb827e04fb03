"""One directory listing as a sized, renderable box.

A box is laid out as::

     ----------
    |  title   |
    |==========|
    | entry    |
    | entry2   |
     ----------

``minimum_width`` is the widest of the title and every rendered item name;
the frame adds four cells of width and four rows of height around it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .ansi import center_text, display_width, printable_name
from .entries import DirectoryItem, ItemState, list_directory_children
from .item_render import item_marker, style_item_name
from .truncation import TruncationPolicy
from .ui_theme import PLAIN_THEME, UITheme

logger = logging.getLogger(__name__)

BORDER_CHAR = "-"
SIDE_CHAR = "|"
SEPARATOR_CHAR = "="
FRAME_WIDTH = 4
FRAME_HEIGHT = 4


def directory_display_name(path: Path) -> str:
    """Return the box title for ``path``; the root is titled by its full path."""
    return printable_name(path.name or str(path))


@dataclass
class DirectoryBox:
    name: str
    path: Path
    items: list[DirectoryItem] = field(default_factory=list)
    minimum_width: int = 0

    @classmethod
    def from_path(
        cls,
        path: Path,
        marked_child: Path | None = None,
        policy: TruncationPolicy | None = None,
        show_hidden: bool = True,
        pinned: Path | None = None,
    ) -> DirectoryBox:
        """Enumerate ``path`` and build its box.

        The entry whose path equals ``marked_child`` is marked
        ``DIRECTORY_IN_PATH``. Raises ``DirectoryReadError`` when the directory
        cannot be listed; there is no partially filled box. ``marked_child``
        and ``pinned`` stay listed even when hidden entries are skipped.
        """
        active_policy = policy or TruncationPolicy.none()
        always_include = {p for p in (marked_child, pinned) if p is not None}
        children = list_directory_children(path, show_hidden=show_hidden, always_include=always_include)
        display_names = [printable_name(child.name) for child in children]
        context = active_policy.context_for([display_width(display) for display in display_names])

        items: list[DirectoryItem] = []
        longest = 0
        for child, display in zip(children, display_names):
            item = DirectoryItem(
                name=child.name,
                path=child.path,
                kind=child.kind,
                rendered_name=active_policy.apply(display, context),
            )
            longest = max(longest, item.rendered_length)
            if marked_child is not None and child.path == marked_child:
                item.state = ItemState.DIRECTORY_IN_PATH
            items.append(item)

        # list.sort is stable: equal names keep scandir order.
        items.sort(key=lambda item: item.name)

        name = active_policy.apply_title(directory_display_name(path), context)
        minimum_width = max(display_width(name), longest)
        if context.limit is not None:
            logger.debug(f"Truncating names in {path} to {context.limit} cells")
        return cls(name=name, path=path, items=items, minimum_width=minimum_width)

    @property
    def item_count(self) -> int:
        return len(self.items)

    def total_width(self) -> int:
        return self.minimum_width + FRAME_WIDTH

    def total_height(self) -> int:
        return self.item_count + FRAME_HEIGHT

    def find_item(self, state: ItemState) -> DirectoryItem | None:
        return next((item for item in self.items if item.state is state), None)

    def _horizontal_border(self) -> str:
        return f" {BORDER_CHAR * (self.minimum_width + 2)} "

    def render_row(self, row_index: int, theme: UITheme | None = None) -> str:
        """Return one text line of this box, ``total_width()`` cells wide.

        Row indices past the bottom border raise ``IndexError``; callers pad
        shorter boxes themselves.
        """
        last_row = self.total_height() - 1
        if row_index < 0 or row_index > last_row:
            raise IndexError(f"row {row_index} outside box of height {self.total_height()}")

        inner_width = self.minimum_width + 2
        if row_index == 0 or row_index == last_row:
            return self._horizontal_border()
        if row_index == 1:
            return f"{SIDE_CHAR}{center_text(self.name, inner_width)}{SIDE_CHAR}"
        if row_index == 2:
            return f"{SIDE_CHAR}{SEPARATOR_CHAR * inner_width}{SIDE_CHAR}"

        item = self.items[row_index - 3]
        active_theme = theme or PLAIN_THEME
        marker = item_marker(item, active_theme)
        styled = style_item_name(item, active_theme)
        pad = " " * (self.minimum_width - item.rendered_length)
        return f"{SIDE_CHAR}{marker}{styled}{pad} {SIDE_CHAR}"


__all__ = [
    "BORDER_CHAR",
    "SIDE_CHAR",
    "SEPARATOR_CHAR",
    "FRAME_WIDTH",
    "FRAME_HEIGHT",
    "DirectoryBox",
    "directory_display_name",
]
