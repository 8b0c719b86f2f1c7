"""Directory content enumeration used by navigation and walking."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectoryChild:
    """One entry name plus whether it is treated as a file."""

    name: str
    is_file: bool


Lister = Callable[[str], Iterable[DirectoryChild]]


def list_entries(directory: str) -> list[DirectoryChild]:
    """List the entries of ``directory`` in ``os.scandir`` order.

    Anything that is not a directory counts as a file, and symlinks are
    classified without being followed. Returns an empty list when the
    directory cannot be opened or read.
    """
    children: list[DirectoryChild] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                try:
                    is_dir = child.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False
                children.append(DirectoryChild(name=child.name, is_file=not is_dir))
    except OSError as exc:
        logger.debug(f"Skipping unreadable directory {directory}: {exc}")
        return []
    return children


__all__ = ["DirectoryChild", "Lister", "list_entries"]
