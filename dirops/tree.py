"""Recursive directory-tree builder and pruner."""

import logging
import os
from typing import Optional

from .exceptions import CreateFailedError, RemoveFailedError
from .filesystem import DEFAULT_MODE, Filesystem, resolve_filesystem
from .typing import PathType

logger = logging.getLogger(__name__)

EXIST_OK_HINT = "pass exist_ok=True to allow an existing directory"


def _split_leaf(fs: Filesystem, path: str):
    head, tail = fs.split(path)
    if not tail:
        # Trailing separator; the leaf is the last component of ``head``.
        head, tail = fs.split(head)
    return head, tail


def makedirs(
    path: PathType,
    mode: int = DEFAULT_MODE,
    exist_ok: bool = False,
    *,
    fs: Optional[Filesystem] = None,
):
    """Create ``path`` along with every missing ancestor directory.

    Ancestors are created with the default mode; ``mode`` applies to the
    leaf only. A failure while creating an ancestor is logged and ignored,
    since another process may have created it between the existence check
    and the ``mkdir`` call. The leaf's own creation then decides the
    outcome.

    Parameters
    ----------
    path: PathType
        Directory to create.
    mode: int
        Permission bits for the leaf, subject to the process umask.
    exist_ok: bool
        If ``True``, an already existing directory at ``path`` is not an error.
    fs: Optional[Filesystem]
        Backend to operate on. Defaults to the host filesystem.

    Raises
    ------
    CreateFailedError
        The leaf could not be created, and it isn't an existing directory
        tolerated by ``exist_ok``.
    """
    fs = resolve_filesystem(fs)
    path = os.fspath(path)

    head, tail = _split_leaf(fs, path)
    if head and tail and not fs.exists(head):
        try:
            makedirs(head, exist_ok=exist_ok, fs=fs)
        except CreateFailedError as e:
            logger.debug(f"Ignoring failure to create ancestor {head!r}: {e}")
        if tail == fs.curdir:
            # "head/." names the directory just created.
            return

    try:
        fs.mkdir(path, mode)
    except CreateFailedError as e:
        if not exist_ok:
            raise CreateFailedError(e.errno, f"{e.strerror} ({EXIST_OK_HINT})", e.filename) from e
        if not fs.isdir(path):
            raise


def removedirs(path: PathType, *, fs: Optional[Filesystem] = None):
    """Remove the leaf directory ``path``, then every ancestor that became empty.

    The walk upward stops silently at the first ancestor that cannot be
    removed; usually one that still holds other entries.

    Parameters
    ----------
    path: PathType
        Empty directory to remove.
    fs: Optional[Filesystem]
        Backend to operate on. Defaults to the host filesystem.

    Raises
    ------
    RemoveFailedError
        The leaf itself could not be removed. No ancestor is touched.
    """
    fs = resolve_filesystem(fs)
    path = os.fspath(path)

    fs.rmdir(path)

    head, tail = _split_leaf(fs, path)
    while head and tail:
        try:
            fs.rmdir(head)
        except RemoveFailedError as e:
            logger.debug(f"Stopped pruning at {head!r}: {e}")
            break
        head, tail = fs.split(head)
