"""Single-entity operations: thin wrappers over one filesystem call each."""

import os
from typing import Optional

from .filesystem import DEFAULT_MODE, Filesystem, resolve_filesystem
from .typing import PathType


def mkdir(path: PathType, mode: int = DEFAULT_MODE, *, fs: Optional[Filesystem] = None):
    """Create directory ``path``.

    Raises
    ------
    CreateFailedError
        ``path`` exists, its parent is missing, permission was denied, etc.
    """
    resolve_filesystem(fs).mkdir(os.fspath(path), mode)


def rmdir(path: PathType, *, fs: Optional[Filesystem] = None):
    """Remove the empty directory ``path``.

    Raises
    ------
    RemoveFailedError
        ``path`` is not empty, not a directory, or does not exist.
    """
    resolve_filesystem(fs).rmdir(os.fspath(path))


def remove(path: PathType, *, fs: Optional[Filesystem] = None):
    """Remove the file ``path``.

    Raises
    ------
    RemoveFailedError
        ``path`` is a directory, does not exist, or permission was denied.
    """
    resolve_filesystem(fs).remove(os.fspath(path))


unlink = remove
