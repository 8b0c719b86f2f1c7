"""Normalized path values: ``Path``, ``FilePath`` and ``DirectoryPath``.

A path is a tuple of segments parsed from an absolute string under a
``PathPolicy``. ``FilePath`` values are immutable. ``DirectoryPath`` is a
navigation cursor: an immutable base tuple plus a stack of entered names,
so a ``copy()`` taken before ``enter``/``exit`` keeps its value.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Sequence
from typing import IO

from .common_root import find_common_root
from .errors import InvalidPath
from .listing import Lister, list_entries
from .normalize import CURRENT, PARENT, normalize_segments
from .policy import PathPolicy, host_policy
from .walk import DirectoryWalker

logger = logging.getLogger(__name__)


def _check_segment(name: str, policy: PathPolicy) -> str:
    """Reject names that are not a single normalized segment."""
    if not name or name in (CURRENT, PARENT):
        raise InvalidPath(f"Invalid path segment: {name!r}")
    if any(separator in name for separator in policy.separators):
        raise InvalidPath(f"Path segment contains a separator: {name!r}")
    return name


class Path:
    """Normalized absolute path shared by file and directory paths."""

    def __init__(self, raw: str, policy: PathPolicy | None = None) -> None:
        policy = policy if policy is not None else host_policy()
        self._assign(normalize_segments(raw, policy), policy)

    def _assign(self, parts: tuple[str, ...], policy: PathPolicy) -> None:
        self._policy = policy
        self._parts = parts

    @classmethod
    def _from_parts(cls, parts: Sequence[str], policy: PathPolicy):
        path = cls.__new__(cls)
        path._assign(tuple(parts), policy)
        return path

    @classmethod
    def qualify(cls, raw: str, policy: PathPolicy | None = None):
        """Build a path from ``raw``, resolving relative input against the cwd."""
        policy = policy if policy is not None else host_policy()
        if policy.is_absolute(raw):
            return cls(raw, policy)
        from .locations import locate_working_directory

        working_directory = locate_working_directory(policy)
        return cls(working_directory.as_absolute_string() + policy.separator + raw, policy)

    @property
    def policy(self) -> PathPolicy:
        return self._policy

    @property
    def parts(self) -> tuple[str, ...]:
        return self._parts

    def is_root(self) -> bool:
        return len(self.parts) <= self._policy.reserved_prefix

    def depth(self) -> int:
        """Number of segments below the root."""
        return len(self.parts) - self._policy.reserved_prefix

    def as_absolute_string(self) -> str:
        """Join segments into the platform's absolute spelling.

        Root-relative platforms always lead with the separator, so the root
        is ``/``. Drive-letter platforms start with the drive segment.
        """
        separator = self._policy.separator
        joined = separator.join(self.parts)
        if self._policy.drive_letter:
            return joined
        return separator + joined

    def as_os_string(self) -> str:
        """Spelling to hand to the operating system.

        A bare drive root gets a trailing separator, since ``C:`` alone names
        the current directory of drive C rather than its root.
        """
        absolute = self.as_absolute_string()
        if self._policy.drive_letter and self.is_root():
            return absolute + self._policy.separator
        return absolute

    def as_relative_string(self, from_directory: Path) -> str:
        """Spell this path relative to ``from_directory``.

        Emits one ``..`` per segment of ``from_directory`` past the common
        root, then this path's segments past it. Identical paths give ``""``.
        """
        common = find_common_root(self.parts, from_directory.parts)
        climbs = [PARENT] * (len(from_directory.parts) - common.other_divergence)
        descents = list(self.parts[common.local_divergence:])
        return self._policy.separator.join(climbs + descents)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.parts == other.parts

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.parts))

    def __str__(self) -> str:
        return self.as_absolute_string()

    def __fspath__(self) -> str:
        return self.as_os_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.as_absolute_string()!r})"


class FilePath(Path):
    """Path to a file: parent directory segments followed by a file name."""

    def _assign(self, parts: tuple[str, ...], policy: PathPolicy) -> None:
        if len(parts) <= policy.reserved_prefix:
            raise InvalidPath("File paths must name a file below the root.")
        super()._assign(parts, policy)

    def file(self) -> str:
        return self._parts[-1]

    def directory(self) -> DirectoryPath:
        return DirectoryPath._from_parts(self._parts[:-1], self._policy)

    def exists(self) -> bool:
        return os.path.exists(self)

    def open_read(self, binary: bool = False, encoding: str = "utf-8") -> IO:
        """Open the file for reading."""
        if binary:
            return open(self, "rb")
        return open(self, "r", encoding=encoding)

    def open_write(
        self,
        append: bool = False,
        truncate: bool = True,
        binary: bool = False,
        encoding: str = "utf-8",
    ) -> IO:
        """Open the file for writing, creating it when missing.

        ``append`` positions every write at the end of the file and
        ``truncate`` empties existing content first unless appending. With
        neither, writes overwrite existing bytes from the start.
        """
        flags = os.O_WRONLY | os.O_CREAT
        if append:
            flags |= os.O_APPEND
        if truncate and not append:
            flags |= os.O_TRUNC
        fd = os.open(self, flags, 0o666)
        mode = "a" if append else "w"
        if binary:
            return os.fdopen(fd, mode + "b")
        return os.fdopen(fd, mode, encoding=encoding)

    def delete(self) -> bool:
        """Remove the file, returning ``False`` when it could not be removed."""
        try:
            os.unlink(self)
        except OSError as exc:
            logger.debug(f"Failed to delete {self}: {exc}")
            return False
        return True


class DirectoryPath(Path):
    """Directory path that doubles as a mutable navigation cursor."""

    __hash__ = None  # type: ignore[assignment]

    def _assign(self, parts: tuple[str, ...], policy: PathPolicy) -> None:
        if len(parts) < policy.reserved_prefix:
            raise InvalidPath("Drive-letter paths must keep their drive segment.")
        self._policy = policy
        self._base = parts
        self._entered: list[str] = []

    @property
    def parts(self) -> tuple[str, ...]:
        if not self._entered:
            return self._base
        return self._base + tuple(self._entered)

    def copy(self) -> DirectoryPath:
        return DirectoryPath._from_parts(self.parts, self._policy)

    __copy__ = copy

    def enter(self, name: str) -> DirectoryPath:
        """Move the cursor into the child directory ``name``."""
        self._entered.append(_check_segment(name, self._policy))
        return self

    def exit(self) -> DirectoryPath:
        """Move the cursor to the parent directory."""
        if self.is_root():
            raise InvalidPath("Cannot exit above the root directory.")
        if self._entered:
            self._entered.pop()
        else:
            self._base = self._base[:-1]
        return self

    def select(self, name: str) -> FilePath:
        """Return the path of file ``name`` inside this directory."""
        return FilePath._from_parts(self.parts + (_check_segment(name, self._policy),), self._policy)

    def find_common_root(self, other: DirectoryPath) -> DirectoryPath:
        """Return the deepest directory containing both ``self`` and ``other``."""
        common = find_common_root(self.parts, other.parts)
        if len(common.prefix) < self._policy.reserved_prefix:
            raise InvalidPath(f"{self} and {other} share no common root.")
        return DirectoryPath._from_parts(common.prefix, self._policy)

    def list_files(self, lister: Lister | None = None) -> list[str]:
        lister = lister if lister is not None else list_entries
        return [child.name for child in lister(self.as_os_string()) if child.is_file]

    def list_directories(self, lister: Lister | None = None) -> list[str]:
        lister = lister if lister is not None else list_entries
        return [child.name for child in lister(self.as_os_string()) if not child.is_file]

    def walk(self, process: Callable[[FilePath], None], lister: Lister | None = None) -> None:
        """Call ``process`` for every file below this directory, depth first."""
        DirectoryWalker(self, lister=lister).run(process)

    def create(self, ensure_ancestors: bool = False) -> bool:
        """Create this directory, optionally creating each missing ancestor.

        Directories that already exist count as created.
        """
        if not ensure_ancestors:
            return _make_directory(self.as_os_string())

        parts = self.parts
        for end in range(self._policy.reserved_prefix + 1, len(parts) + 1):
            ancestor = DirectoryPath._from_parts(parts[:end], self._policy)
            if not _make_directory(ancestor.as_os_string()):
                return False
        return True


def _make_directory(path: str) -> bool:
    try:
        os.mkdir(path)
    except FileExistsError:
        return True
    except OSError as exc:
        logger.debug(f"Failed to create directory {path}: {exc}")
        return False
    return True


__all__ = ["Path", "FilePath", "DirectoryPath"]
