"""Platform-neutral filesystem paths and depth-first directory walking.

``FilePath`` and ``DirectoryPath`` parse absolute strings into normalized
segment tuples under a ``PathPolicy``. ``DirectoryWalker`` visits every
file below a directory without recursion.
"""

from __future__ import annotations

from .common_root import CommonRoot, find_common_root
from .errors import InvalidPath, PathError, SystemPathError
from .listing import DirectoryChild, list_entries
from .locations import (
    create_temporary_file,
    locate_document_directory,
    locate_global_config_file,
    locate_temporary_directory,
    locate_user_config_file,
    locate_working_directory,
)
from .normalize import normalize_segments
from .paths import DirectoryPath, FilePath, Path
from .policy import POSIX_POLICY, WINDOWS_POLICY, PathPolicy, host_policy
from .tokens import SegmentTokenizer, split_tokens
from .walk import Ascend, Descend, DirectoryWalker


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "Ascend",
    "CommonRoot",
    "Descend",
    "DirectoryChild",
    "DirectoryPath",
    "DirectoryWalker",
    "FilePath",
    "InvalidPath",
    "Path",
    "PathError",
    "PathPolicy",
    "POSIX_POLICY",
    "SegmentTokenizer",
    "SystemPathError",
    "WINDOWS_POLICY",
    "create_temporary_file",
    "find_common_root",
    "host_policy",
    "list_entries",
    "locate_document_directory",
    "locate_global_config_file",
    "locate_temporary_directory",
    "locate_user_config_file",
    "locate_working_directory",
    "main",
    "normalize_segments",
    "split_tokens",
]
