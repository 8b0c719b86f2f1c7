"""Iterative depth-first directory walking.

The walk keeps an explicit LIFO stack of ``Descend``/``Ascend`` actions
instead of recursing, so tree depth is bounded by memory rather than the
interpreter's recursion limit. Every ``Descend`` pushes a matching
``Ascend`` beneath its children's actions, which keeps ``marker`` on the
directory the next action expects.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .listing import Lister, list_entries

if TYPE_CHECKING:
    from .paths import DirectoryPath, FilePath

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Descend:
    """Enter child directory ``name`` of the marker."""

    name: str


@dataclass(frozen=True)
class Ascend:
    """Return the marker to its parent directory."""


WalkAction = Descend | Ascend


class DirectoryWalker:
    """Depth-first walk reporting a directory's files before its subtrees.

    Sibling subdirectories are visited in listing order. Directories the
    lister cannot open are treated as empty. Symlink cycles are not
    detected.
    """

    def __init__(self, root: DirectoryPath, lister: Lister | None = None) -> None:
        self.root = root.copy()
        self.marker = root.copy()
        self._lister = lister if lister is not None else list_entries
        self._actions: list[WalkAction] = []

    def iter_files(self) -> Iterator[FilePath]:
        """Yield every file below the root in walk order."""
        self.marker = self.root.copy()
        self._actions = []

        yield from self._visit_marker()
        while self._actions:
            action = self._actions.pop()
            if isinstance(action, Ascend):
                self.marker.exit()
                continue
            self.marker.enter(action.name)
            self._actions.append(Ascend())
            yield from self._visit_marker()

    def run(self, process: Callable[[FilePath], None]) -> int:
        """Call ``process`` for each file and return how many were visited."""
        logger.debug(f"Walking {self.root}")
        visited = 0
        for file_path in self.iter_files():
            process(file_path)
            visited += 1
        logger.debug(f"Walk of {self.root} finished: {visited} files")
        return visited

    def _visit_marker(self) -> Iterator[FilePath]:
        # One listing per directory; the scandir handle is closed before yielding.
        entries = list(self._lister(self.marker.as_os_string()))
        directories = [entry.name for entry in entries if not entry.is_file]
        self._actions.extend(Descend(name) for name in reversed(directories))
        for entry in entries:
            if entry.is_file:
                yield self.marker.select(entry.name)


__all__ = ["Descend", "Ascend", "WalkAction", "DirectoryWalker"]
