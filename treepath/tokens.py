"""Separator-delimited tokenizing of raw path strings."""

from __future__ import annotations

from collections.abc import Iterable


class SegmentTokenizer:
    """Iterator over the raw tokens between separators of ``raw``.

    Consecutive separators produce empty tokens and a trailing separator
    produces a final empty token. ``position`` is the index the next scan
    starts from, or ``None`` once the last token has been returned.
    """

    def __init__(self, raw: str, separators: Iterable[str], position: int = 0) -> None:
        self._raw = raw
        self._separators = frozenset(separators)
        self.position: int | None = position

    def __iter__(self) -> SegmentTokenizer:
        return self

    def __next__(self) -> str:
        start = self.position
        if start is None:
            raise StopIteration
        raw = self._raw
        for index in range(start, len(raw)):
            if raw[index] in self._separators:
                self.position = index + 1
                return raw[start:index]
        self.position = None
        return raw[start:]


def split_tokens(raw: str, separators: Iterable[str]) -> list[str]:
    """Return every token of ``raw`` as a list."""
    return list(SegmentTokenizer(raw, separators))


__all__ = ["SegmentTokenizer", "split_tokens"]
