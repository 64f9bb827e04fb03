"""Public package surface for dirtrail.

Exports ``main`` for programmatic CLI invocation plus the chain builder and
row-wrap renderer. Most implementation lives in submodules.
"""

from __future__ import annotations

from .box import DirectoryBox
from .chain import BreadcrumbChain, build_chain
from .errors import DirectoryReadError, DirtrailError, TerminalSizeUnavailable
from .layout import LayoutRow, plan_rows, render_chain
from .truncation import TruncationMode, TruncationPolicy


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "main",
    "DirectoryBox",
    "BreadcrumbChain",
    "build_chain",
    "DirtrailError",
    "DirectoryReadError",
    "TerminalSizeUnavailable",
    "LayoutRow",
    "plan_rows",
    "render_chain",
    "TruncationMode",
    "TruncationPolicy",
]
