"""Styled display text for one directory item."""

from __future__ import annotations

from pygments.console import ansiformat

from .entries import DirectoryItem, ItemKind, ItemState
from .ui_theme import DEFAULT_THEME, UITheme


def item_style(item: DirectoryItem, theme: UITheme, highlight: bool = True) -> str:
    """Return the ``ansiformat`` attribute for ``item``; navigation state wins over kind."""
    if highlight:
        if item.state is ItemState.SELECTED:
            return theme.selected
        if item.state is ItemState.DIRECTORY_IN_PATH:
            return theme.in_path
    if item.kind is ItemKind.DIRECTORY:
        return theme.directory
    if item.kind is ItemKind.SYMLINK:
        return theme.symlink
    if item.kind is ItemKind.OTHER:
        return theme.other
    return theme.file


def item_marker(item: DirectoryItem, theme: UITheme) -> str:
    """Return the one-cell left-margin marker for ``item``."""
    if item.state is ItemState.SELECTED:
        return theme.selected_marker
    if item.state is ItemState.DIRECTORY_IN_PATH:
        return theme.in_path_marker
    return " "


def style_item_name(item: DirectoryItem, theme: UITheme | None = None, highlight: bool = True) -> str:
    """Render ``item.rendered_name`` with ANSI styling.

    The result occupies exactly ``item.rendered_length`` terminal cells.
    """
    active_theme = theme or DEFAULT_THEME
    attr = item_style(item, active_theme, highlight)
    if not attr:
        return item.rendered_name
    return ansiformat(attr, item.rendered_name)


__all__ = ["item_marker", "item_style", "style_item_name"]
