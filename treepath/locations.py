"""Well-known directories of the running environment as ``treepath`` values.

User and global config locations and the documents folder come from
``platformdirs``. The working and temporary directories come from the
standard library.
"""

from __future__ import annotations

import logging
import os
import tempfile
from typing import IO

from platformdirs import site_config_dir, user_config_dir, user_documents_dir

from .errors import InvalidPath, SystemPathError
from .paths import DirectoryPath, FilePath
from .policy import PathPolicy, host_policy

logger = logging.getLogger(__name__)


def _environment_directory(raw: str, label: str, policy: PathPolicy | None) -> DirectoryPath:
    """Parse a directory reported by the OS, raising ``SystemPathError`` on junk."""
    policy = policy if policy is not None else host_policy()
    try:
        return DirectoryPath(raw, policy)
    except InvalidPath as exc:
        raise SystemPathError(f"Couldn't determine the {label} directory (got {raw!r}).") from exc


def locate_working_directory(policy: PathPolicy | None = None) -> DirectoryPath:
    try:
        raw = os.getcwd()
    except OSError as exc:
        raise SystemPathError("Couldn't obtain working directory!") from exc
    return _environment_directory(raw, "working", policy)


def _select(directory: DirectoryPath, filename: str, project: str | None) -> FilePath:
    if project:
        directory.enter(project)
    return directory.select(filename)


def locate_user_config_file(
    filename: str,
    project: str | None = None,
    policy: PathPolicy | None = None,
) -> FilePath:
    """Return ``filename`` inside the per-user config directory.

    With ``project`` the file lives in a ``project`` subdirectory.
    """
    directory = _environment_directory(user_config_dir(), "user config", policy)
    return _select(directory, filename, project)


def locate_global_config_file(
    filename: str,
    project: str | None = None,
    policy: PathPolicy | None = None,
) -> FilePath:
    """Return ``filename`` inside the machine-wide config directory."""
    directory = _environment_directory(site_config_dir(), "global config", policy)
    return _select(directory, filename, project)


def locate_document_directory(project: str | None = None, policy: PathPolicy | None = None) -> DirectoryPath:
    directory = _environment_directory(user_documents_dir(), "document", policy)
    if project:
        directory.enter(project)
    return directory


def locate_temporary_directory(policy: PathPolicy | None = None) -> DirectoryPath:
    return _environment_directory(tempfile.gettempdir(), "temporary", policy)


def create_temporary_file(
    directory: DirectoryPath | None = None,
    policy: PathPolicy | None = None,
) -> tuple[FilePath, IO[str]]:
    """Create a uniquely named empty file and open it for text writing.

    The caller owns the returned file object and must close it.
    """
    if directory is None:
        directory = locate_temporary_directory(policy)
    try:
        fd, raw = tempfile.mkstemp(dir=directory.as_os_string())
    except OSError as exc:
        raise SystemPathError(f"Failed to create a temporary file in {directory}!") from exc
    try:
        output = os.fdopen(fd, "w", encoding="utf-8")
    except (OSError, LookupError) as exc:
        os.close(fd)
        os.unlink(raw)
        raise SystemPathError(f"Failed to open temporary file {raw}!") from exc
    logger.debug(f"Created temporary file {raw}")
    return FilePath(raw, directory.policy), output


__all__ = [
    "locate_working_directory",
    "locate_user_config_file",
    "locate_global_config_file",
    "locate_document_directory",
    "locate_temporary_directory",
    "create_temporary_file",
]
