"""Typed failures raised while building or measuring a breadcrumb render.

Reaching the filesystem root is not an error: the ancestor walk simply stops.
"""

from __future__ import annotations

from pathlib import Path


class DirtrailError(Exception):
    """Base class for failures reported by the ``dirtrail`` CLI."""


def _describe_cause(cause: BaseException | None) -> str:
    if cause is None:
        return ""
    if isinstance(cause, OSError) and cause.strerror:
        return f": {cause.strerror}"
    return f": {cause}"


class DirectoryReadError(DirtrailError):
    """A directory listing could not be enumerated."""

    def __init__(self, path: Path, cause: BaseException | None = None) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"cannot read directory {self.path}{_describe_cause(cause)}")


class TerminalSizeUnavailable(DirtrailError):
    """The host terminal did not report its dimensions."""


__all__ = [
    "DirtrailError",
    "DirectoryReadError",
    "TerminalSizeUnavailable",
]
