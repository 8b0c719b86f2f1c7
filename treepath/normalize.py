"""Reduce raw absolute path strings to canonical segment tuples."""

from __future__ import annotations

from .errors import InvalidPath
from .policy import PathPolicy
from .tokens import SegmentTokenizer

CURRENT = "."
PARENT = ".."


def normalize_segments(raw: str, policy: PathPolicy) -> tuple[str, ...]:
    """Parse ``raw`` under ``policy`` into its normalized segments.

    Empty tokens and ``.`` are dropped, ``..`` removes the previous
    segment. Raises ``InvalidPath`` for empty or non-absolute input and
    for ``..`` reaching past the root (or the reserved drive segment).
    """
    if not raw:
        raise InvalidPath("Absolute paths must not be empty.")
    if not policy.is_absolute(raw):
        raise InvalidPath(f"Path is not absolute: {raw!r}")

    segments: list[str] = []
    for token in SegmentTokenizer(raw, policy.separators):
        if not token or token == CURRENT:
            continue
        if token == PARENT:
            if len(segments) <= policy.reserved_prefix:
                raise InvalidPath(f"'..' escapes the root in {raw!r}")
            segments.pop()
            continue
        segments.append(token)
    return tuple(segments)


__all__ = ["CURRENT", "PARENT", "normalize_segments"]
