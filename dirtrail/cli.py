"""Command-line front door for dirtrail.

Parses CLI options, merges them over config defaults, and resolves the
render width. Then builds the whole breadcrumb chain before writing anything,
so a failing directory read never leaves a half-drawn trail on stdout.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import TextIO

from .chain import ancestor_paths, build_chain, resolve_target
from .config import load_render_settings, parse_truncation_mode
from .errors import DirtrailError
from .layout import render_chain
from .terminal import resolve_terminal_width
from .truncation import TruncationMode, TruncationPolicy
from .ui_theme import resolve_theme

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _nonnegative_int(value: str) -> int:
    """argparse type for integer values >= 0."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def _color_enabled(stream: TextIO, no_color: bool, config_color: bool) -> bool:
    if no_color or not config_color or os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def render_path(
    path: Path,
    stream: TextIO,
    terminal_width: int,
    truncation: TruncationMode = TruncationMode.NONE,
    spacing: int = 1,
    row_spacing: int = 1,
    show_hidden: bool = True,
    color: bool = False,
) -> None:
    """Render the breadcrumb trail for ``path`` to ``stream``.

    Raises ``DirectoryReadError`` before any output when an ancestor cannot be
    listed.
    """
    leaf_directory, _selected = resolve_target(path)
    policy = TruncationPolicy.for_mode(
        truncation,
        box_count=len(ancestor_paths(leaf_directory)),
        terminal_width=terminal_width,
        spacing=spacing,
    )
    chain = build_chain(path, policy=policy, show_hidden=show_hidden)
    render_chain(
        chain.boxes,
        stream,
        terminal_width,
        spacing=spacing,
        row_spacing=row_spacing,
        theme=resolve_theme(no_color=not color),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirtrail",
        description="Print the directory listings from the filesystem root down to a path.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Target path. Defaults to current directory.")
    parser.add_argument("--width", type=_positive_int, default=None, help="Render width (default: terminal width).")
    parser.add_argument(
        "--truncate",
        choices=[mode.value for mode in TruncationMode],
        default=None,
        help="Name truncation mode (default: from config, else none).",
    )
    parser.add_argument("--spacing", type=_nonnegative_int, default=None, help="Columns between boxes.")
    parser.add_argument("--row-spacing", type=_nonnegative_int, default=None, help="Blank lines between rows.")
    parser.add_argument("--hide-hidden", action="store_true", help="Skip entries whose name starts with a dot.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    return parser


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and print the breadcrumb trail.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. Failures exit with status 1 and a one-line diagnostic
    on stderr.
    """
    args = build_parser().parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    settings = load_render_settings()
    try:
        if default_path is None:
            default_path = Path.cwd()
        path = Path(args.path or default_path)
        exists = path.exists()
    except OSError as exc:
        target = args.path or "current directory"
        raise SystemExit(f"dirtrail: error: cannot access {target}: {exc.strerror or exc}") from exc
    if not exists:
        raise SystemExit(f"dirtrail: error: path not found: {path}")

    spacing = args.spacing if args.spacing is not None else settings.spacing
    row_spacing = args.row_spacing if args.row_spacing is not None else settings.row_spacing
    truncation = parse_truncation_mode(args.truncate, settings.truncation)
    width = resolve_terminal_width(args.width, fallback=settings.fallback_width, stream=sys.stdout)
    logger.debug(f"Rendering {path} at width {width} with truncation {truncation.value}")

    try:
        render_path(
            path,
            sys.stdout,
            width,
            truncation=truncation,
            spacing=spacing,
            row_spacing=row_spacing,
            show_hidden=settings.show_hidden and not args.hide_hidden,
            color=_color_enabled(sys.stdout, args.no_color, settings.color),
        )
    except DirtrailError as exc:
        raise SystemExit(f"dirtrail: error: {exc}") from exc


if __name__ == "__main__":
    main()
