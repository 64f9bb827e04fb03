"""Read-only JSON config for render defaults.

Stores box spacing, truncation mode, fallback width, hidden-file and color
preferences. All access is defensive: a missing or malformed file, or a value
of the wrong type, falls back to the built-in default. Nothing is written back.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .layout import DEFAULT_BOX_SPACING, DEFAULT_ROW_SPACING
from .terminal import DEFAULT_FALLBACK_WIDTH
from .truncation import TruncationMode

APP_NAME = "dirtrail"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class RenderSettings:
    """Effective render defaults before CLI overrides."""

    spacing: int = DEFAULT_BOX_SPACING
    row_spacing: int = DEFAULT_ROW_SPACING
    truncation: TruncationMode = TruncationMode.NONE
    fallback_width: int = DEFAULT_FALLBACK_WIDTH
    show_hidden: bool = True
    color: bool = True


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _coerce_int(value: object, default: int, minimum: int) -> int:
    """Accept real integers at or above ``minimum``; booleans are rejected."""
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    if value < minimum:
        return default
    return value


def _coerce_bool(value: object, default: bool) -> bool:
    return value if isinstance(value, bool) else default


def parse_truncation_mode(value: object, default: TruncationMode = TruncationMode.NONE) -> TruncationMode:
    """Map a config/CLI string onto a ``TruncationMode``."""
    if not isinstance(value, str):
        return default
    candidate = value.strip().lower()
    for mode in TruncationMode:
        if mode.value == candidate:
            return mode
    return default


def load_render_settings() -> RenderSettings:
    """Return render defaults merged from the config file."""
    data = load_config()
    defaults = RenderSettings()
    return RenderSettings(
        spacing=_coerce_int(data.get("spacing"), defaults.spacing, 0),
        row_spacing=_coerce_int(data.get("row_spacing"), defaults.row_spacing, 0),
        truncation=parse_truncation_mode(data.get("truncation"), defaults.truncation),
        fallback_width=_coerce_int(data.get("fallback_width"), defaults.fallback_width, 1),
        show_hidden=_coerce_bool(data.get("show_hidden"), defaults.show_hidden),
        color=_coerce_bool(data.get("color"), defaults.color),
    )


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "RenderSettings",
    "load_config",
    "parse_truncation_mode",
    "load_render_settings",
]
