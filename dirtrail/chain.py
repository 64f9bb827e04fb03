"""Breadcrumb chain construction: one box per ancestor of a target path.

The walk runs leaf-first and inserts each box at the front, so the finished
chain reads from the filesystem root down to the target.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from .box import DirectoryBox
from .entries import DirectoryItem, ItemState
from .errors import DirectoryReadError
from .truncation import TruncationPolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BreadcrumbChain:
    """Root-to-target ordered directory boxes."""

    target: Path
    boxes: tuple[DirectoryBox, ...]

    def __len__(self) -> int:
        return len(self.boxes)

    def __iter__(self) -> Iterator[DirectoryBox]:
        return iter(self.boxes)

    def __getitem__(self, index: int) -> DirectoryBox:
        return self.boxes[index]

    @property
    def leaf(self) -> DirectoryBox:
        return self.boxes[-1]

    def selected_item(self) -> DirectoryItem | None:
        """Return the single ``SELECTED`` item across the chain, if any."""
        for box in self.boxes:
            item = box.find_item(ItemState.SELECTED)
            if item is not None:
                return item
        return None


def ancestor_paths(directory: Path) -> list[Path]:
    """Return ``directory`` and all its ancestors, root first."""
    paths: deque[Path] = deque()
    current = directory
    while True:
        paths.appendleft(current)
        parent = current.parent
        if parent == current:
            break
        current = parent
    return list(paths)


def resolve_target(target: Path) -> tuple[Path, Path | None]:
    """Return ``(leaf_directory, selected_file)`` for a user-supplied target.

    Directories are their own leaf. A non-directory target lists its parent
    with the target itself as the cursor. Raises ``DirectoryReadError`` when
    the target cannot be inspected.
    """
    try:
        resolved = Path(target).expanduser().resolve()
        is_directory = resolved.is_dir()
    except OSError as exc:
        raise DirectoryReadError(Path(target), exc) from exc
    if is_directory or resolved.parent == resolved:
        return resolved, None
    return resolved.parent, resolved


def _select_default_cursor(leaf: DirectoryBox, selected_path: Path | None) -> None:
    if not leaf.items:
        return
    if any(item.state is not ItemState.NORMAL for item in leaf.items):
        return
    if selected_path is not None:
        for item in leaf.items:
            if item.path == selected_path:
                item.state = ItemState.SELECTED
                return
    leaf.items[0].state = ItemState.SELECTED


def build_chain(
    target: Path,
    policy: TruncationPolicy | None = None,
    show_hidden: bool = True,
) -> BreadcrumbChain:
    """Build the breadcrumb chain from the filesystem root down to ``target``.

    Raises ``DirectoryReadError`` if any ancestor cannot be enumerated; no
    partial chain is returned.
    """
    leaf_directory, selected_path = resolve_target(target)
    boxes: deque[DirectoryBox] = deque()
    current = leaf_directory
    child_of_interest: Path | None = None

    while True:
        boxes.appendleft(
            DirectoryBox.from_path(
                current,
                marked_child=child_of_interest,
                policy=policy,
                show_hidden=show_hidden,
                pinned=selected_path if current == leaf_directory else None,
            )
        )
        child_of_interest = current
        parent = current.parent
        if parent == current:
            break
        current = parent

    _select_default_cursor(boxes[-1], selected_path)
    logger.debug(f"Built chain of {len(boxes)} boxes for {leaf_directory}")
    return BreadcrumbChain(target=leaf_directory, boxes=tuple(boxes))


__all__ = [
    "BreadcrumbChain",
    "ancestor_paths",
    "resolve_target",
    "build_chain",
]
