"""Exception types raised by path parsing and filesystem helpers."""

from __future__ import annotations


class PathError(Exception):
    """Base class for every error raised by ``treepath``."""


class InvalidPath(PathError, ValueError):
    """Raised when a raw string cannot be parsed into a normalized path.

    Covers empty input, input that is not absolute for the active policy,
    and ``..`` tokens that would climb above the root.
    """


class SystemPathError(PathError, OSError):
    """Raised when an operating-system lookup needed for navigation fails."""


__all__ = ["PathError", "InvalidPath", "SystemPathError"]
