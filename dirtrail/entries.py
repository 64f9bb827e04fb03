"""Directory enumeration and the per-entry item model shown inside a box."""

from __future__ import annotations

import logging
import os
from collections.abc import Collection
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .ansi import display_width
from .errors import DirectoryReadError

logger = logging.getLogger(__name__)


class ItemKind(Enum):
    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"


class ItemState(Enum):
    """Navigation state of one entry within the breadcrumb chain."""

    NORMAL = "normal"
    SELECTED = "selected"
    DIRECTORY_IN_PATH = "directory_in_path"


@dataclass(frozen=True)
class DirectoryChild:
    """One raw directory entry as reported by the filesystem."""

    name: str
    path: Path
    kind: ItemKind


@dataclass
class DirectoryItem:
    """One entry rendered inside a directory box.

    ``rendered_name`` is the display text after truncation; ``name`` keeps the
    raw entry name used for sorting and matching.
    """

    name: str
    path: Path
    kind: ItemKind
    rendered_name: str
    state: ItemState = ItemState.NORMAL
    rendered_length: int = field(init=False)

    def __post_init__(self) -> None:
        self.rendered_length = display_width(self.rendered_name)


def _entry_kind(entry: os.DirEntry) -> ItemKind:
    """Classify a scandir entry without following symlinks."""
    try:
        if entry.is_symlink():
            return ItemKind.SYMLINK
        if entry.is_dir(follow_symlinks=False):
            return ItemKind.DIRECTORY
        if entry.is_file(follow_symlinks=False):
            return ItemKind.FILE
    except OSError:
        pass
    return ItemKind.OTHER


def list_directory_children(
    directory: Path,
    show_hidden: bool = True,
    always_include: Collection[Path] = (),
) -> list[DirectoryChild]:
    """List entries of ``directory`` in filesystem order.

    Hidden entries are skipped unless ``show_hidden`` is set or their path is
    in ``always_include``.

    Raises ``DirectoryReadError`` when the directory cannot be opened or
    iterated (missing, not a directory, permission denied, removed mid-scan).
    """
    children: list[DirectoryChild] = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                if not show_hidden and entry.name.startswith(".") and Path(entry.path) not in always_include:
                    continue
                children.append(DirectoryChild(name=entry.name, path=Path(entry.path), kind=_entry_kind(entry)))
    except OSError as exc:
        raise DirectoryReadError(directory, exc) from exc

    logger.debug(f"Listed {len(children)} entries in {directory}")
    return children


__all__ = [
    "ItemKind",
    "ItemState",
    "DirectoryChild",
    "DirectoryItem",
    "list_directory_children",
]
