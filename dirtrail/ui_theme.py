"""Fixed ANSI palettes for item names inside directory boxes.

Each style field is a ``pygments.console.ansiformat`` attribute string (``"*blue*"`` is
bold blue, ``"_green_"`` underlined green). An empty string means unstyled.

The marker fields are one cell wide and fill the left margin of an item row;
the plain palette uses them so navigation state survives without color.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic palette used by the item renderer."""

    name: str
    directory: str
    symlink: str
    file: str
    other: str
    in_path: str
    selected: str
    in_path_marker: str = " "
    selected_marker: str = " "


DEFAULT_THEME = UITheme(
    name="default",
    directory="*blue*",
    symlink="cyan",
    file="",
    other="yellow",
    in_path="*brightyellow*",
    selected="*_brightgreen_*",
)

PLAIN_THEME = UITheme(
    name="plain",
    directory="",
    symlink="",
    file="",
    other="",
    in_path="",
    selected="",
    in_path_marker="*",
    selected_marker=">",
)


def resolve_theme(*, no_color: bool = False) -> UITheme:
    """Return the palette for the requested color mode."""
    if no_color:
        return PLAIN_THEME
    return DEFAULT_THEME


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "PLAIN_THEME",
    "resolve_theme",
]
