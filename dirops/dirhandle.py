"""Scoped ownership of a native ``DIR *`` directory stream.

Importing this module on a platform without a registered
:class:`~dirops.dirent.DirentLayout` raises
:class:`~dirops.exceptions.FeatureUnavailableError`.
"""

import ctypes
import errno
import logging
import os
import sys
from typing import Iterator, List, Optional

from .dirent import DirEntry, is_supported_platform, native_layout
from .exceptions import FeatureUnavailableError, NotDirectoryError, OpenFailedError
from .typing import PathType

if not is_supported_platform():
    raise FeatureUnavailableError(
        f'Directory listing requires a POSIX directory stream; platform "{sys.platform}" is not supported.'
    )

logger = logging.getLogger(__name__)

_SELF_AND_PARENT = (".", "..")


class DirectoryHandle:
    """Exclusive owner of one open directory stream.

    Can be used as a context manager; calls ``self.close`` on exit, whether
    the block finishes normally or raises.

    Parameters
    ----------
    path: PathType
        Directory to open. Defaults to the current directory.

    Raises
    ------
    NotDirectoryError
        ``path`` does not exist or is not a directory. Checked before the
        stream is opened.
    OpenFailedError
        ``opendir(3)`` returned ``NULL``; ``errno`` holds the reason.
    """

    def __init__(self, path: PathType = "."):
        self._dirp: Optional[int] = None
        self.path = os.fspath(path)

        if not os.path.isdir(self.path):
            code = errno.ENOTDIR if os.path.exists(self.path) else errno.ENOENT
            raise NotDirectoryError(code, os.strerror(code), self.path)

        self._layout = native_layout()
        dirp = self._layout.opendir(os.fsencode(self.path))
        if not dirp:
            code = ctypes.get_errno()
            raise OpenFailedError(code, os.strerror(code), self.path)
        self._dirp = dirp
        logger.debug(f"Opened directory stream {self.path!r}.")

    def __repr__(self):
        state = "closed" if self.closed else "open"
        return f"<{type(self).__name__} {self.path!r} {state}>"

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    @property
    def closed(self) -> bool:
        return self._dirp is None

    def close(self):
        """Release the directory stream.

        The stream is released exactly once; later calls do nothing.
        """
        dirp, self._dirp = self._dirp, None
        if dirp is None:
            return
        self._layout.closedir(dirp)
        logger.debug(f"Closed directory stream {self.path!r}.")

    def scan(self) -> Iterator[DirEntry]:
        """Yield every entry except ``.`` and ``..``, in OS order."""
        while True:
            if self._dirp is None:
                raise ValueError("I/O operation on closed directory handle.")
            raw = self._layout.readdir(self._dirp)
            if raw is None:
                # NULL marks the end of the stream.
                return
            entry = self._layout.decode(raw)
            if entry.name in _SELF_AND_PARENT:
                continue
            yield entry

    def list(self) -> List[str]:
        """Names of every entry except ``.`` and ``..``.

        Order is whatever the filesystem enumerates; do not rely on it.
        """
        return [entry.name for entry in self.scan()]


def listdir(path: PathType = ".") -> List[str]:
    """List the entry names of directory ``path``.

    Parameters
    ----------
    path: PathType
        Directory to list. Defaults to the current directory.

    Returns
    -------
    List[str]
        Entry names, excluding ``.`` and ``..``, in no particular order.
    """
    with DirectoryHandle(path) as handle:
        return handle.list()


def scandir(path: PathType = ".") -> List[DirEntry]:
    """Like :func:`listdir`, but returns typed :class:`~dirops.dirent.DirEntry` records."""
    with DirectoryHandle(path) as handle:
        return [entry for entry in handle.scan()]
