"""Filesystem primitives that the tree operations are built on.

:mod:`dirops.tree` never parses paths itself; it only calls the methods of
a :class:`Filesystem`. Backends are registered by name::

    Filesystem["os"]()      # the host filesystem
    Filesystem["memory"]()  # an in-memory tree, handy in tests
"""

import errno
import os
import posixpath
from abc import abstractmethod
from typing import Dict, List, Optional, Set, Tuple

from autoregistry import Registry

from .exceptions import CreateFailedError, NotDirectoryError, RemoveFailedError

DEFAULT_MODE = 0o777


def _fail(exception_cls, code: int, path: str):
    raise exception_cls(code, os.strerror(code), path)


class Filesystem(Registry, suffix="Filesystem"):
    """Narrow interface consumed by :func:`~dirops.tree.makedirs` and friends.

    ``mkdir`` must raise :class:`~dirops.exceptions.CreateFailedError`;
    ``rmdir`` and ``remove`` must raise
    :class:`~dirops.exceptions.RemoveFailedError`.
    """

    curdir = "."

    @abstractmethod
    def split(self, path: str) -> Tuple[str, str]:
        """Split ``path`` into ``(head, tail)`` the way :func:`os.path.split` does."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        pass

    @abstractmethod
    def isdir(self, path: str) -> bool:
        pass

    @abstractmethod
    def mkdir(self, path: str, mode: int = DEFAULT_MODE) -> None:
        pass

    @abstractmethod
    def rmdir(self, path: str) -> None:
        pass

    @abstractmethod
    def remove(self, path: str) -> None:
        pass


class OsFilesystem(Filesystem):
    """The host filesystem, through :mod:`os`."""

    curdir = os.curdir

    def split(self, path: str) -> Tuple[str, str]:
        return os.path.split(path)

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def isdir(self, path: str) -> bool:
        return os.path.isdir(path)

    def mkdir(self, path: str, mode: int = DEFAULT_MODE) -> None:
        try:
            os.mkdir(path, mode)
        except OSError as e:
            raise CreateFailedError(e.errno, e.strerror, path) from e

    def rmdir(self, path: str) -> None:
        try:
            os.rmdir(path)
        except OSError as e:
            raise RemoveFailedError(e.errno, e.strerror, path) from e

    def remove(self, path: str) -> None:
        try:
            os.remove(path)
        except OSError as e:
            raise RemoveFailedError(e.errno, e.strerror, path) from e


class MemoryFilesystem(Filesystem):
    """A POSIX-style directory tree held in memory.

    Relative paths resolve against a virtual working directory ``.``, kept
    separate from the absolute tree rooted at ``/``; both roots always
    exist and cannot be removed (``EBUSY``). The virtual working directory
    has no parent, so paths climbing above it with ``..`` never exist
    (``ENOENT``). Other failures carry the errno Linux reports for the
    same call.
    """

    def __init__(self):
        self._dirs: Dict[str, int] = {"/": DEFAULT_MODE, self.curdir: DEFAULT_MODE}
        self._files: Set[str] = set()

    def __repr__(self):
        return f"{type(self).__name__}(dirs={len(self._dirs)}, files={len(self._files)})"

    @staticmethod
    def _key(path: str) -> str:
        path = os.fspath(path)
        if not path:
            return ""
        return posixpath.normpath(path)

    def _parent(self, key: str) -> str:
        return posixpath.dirname(key) or self.curdir

    def _children(self, key: str) -> List[str]:
        return sorted(
            posixpath.basename(other)
            for other in (*self._dirs, *self._files)
            if other != key and self._parent(other) == key
        )

    def _check_parent(self, exception_cls, key: str, path: str):
        """Fail unless every ancestor of ``key`` is an existing directory."""
        ancestors = []
        parent = self._parent(key)
        while parent not in ancestors:
            ancestors.append(parent)
            parent = self._parent(parent)
        # Outermost first, like the kernel's path walk.
        for ancestor in reversed(ancestors):
            if ancestor in self._files:
                _fail(exception_cls, errno.ENOTDIR, path)
            if ancestor not in self._dirs:
                _fail(exception_cls, errno.ENOENT, path)

    @staticmethod
    def _escapes_curdir(key: str) -> bool:
        return key == posixpath.pardir or key.startswith(posixpath.pardir + "/")

    def split(self, path: str) -> Tuple[str, str]:
        return posixpath.split(path)

    def exists(self, path: str) -> bool:
        key = self._key(path)
        return key in self._dirs or key in self._files

    def isdir(self, path: str) -> bool:
        return self._key(path) in self._dirs

    def mkdir(self, path: str, mode: int = DEFAULT_MODE) -> None:
        key = self._key(path)
        if not key or self._escapes_curdir(key):
            _fail(CreateFailedError, errno.ENOENT, path)
        self._check_parent(CreateFailedError, key, path)
        if key in self._dirs or key in self._files:
            _fail(CreateFailedError, errno.EEXIST, path)
        self._dirs[key] = mode

    def rmdir(self, path: str) -> None:
        key = self._key(path)
        self._check_parent(RemoveFailedError, key, path)
        if key in self._files:
            _fail(RemoveFailedError, errno.ENOTDIR, path)
        if key not in self._dirs:
            _fail(RemoveFailedError, errno.ENOENT, path)
        if key in ("/", self.curdir):
            _fail(RemoveFailedError, errno.EBUSY, path)
        if self._children(key):
            _fail(RemoveFailedError, errno.ENOTEMPTY, path)
        del self._dirs[key]

    def remove(self, path: str) -> None:
        key = self._key(path)
        self._check_parent(RemoveFailedError, key, path)
        if key in self._dirs:
            _fail(RemoveFailedError, errno.EISDIR, path)
        if key not in self._files:
            _fail(RemoveFailedError, errno.ENOENT, path)
        self._files.remove(key)

    def touch(self, path: str) -> None:
        """Create an empty file; a no-op if the file already exists."""
        key = self._key(path)
        if not key or self._escapes_curdir(key):
            _fail(CreateFailedError, errno.ENOENT, path)
        if key in self._dirs:
            _fail(CreateFailedError, errno.EISDIR, path)
        self._check_parent(CreateFailedError, key, path)
        self._files.add(key)

    def listdir(self, path: str = ".") -> List[str]:
        """Sorted entry names of directory ``path``."""
        key = self._key(path)
        if key not in self._dirs:
            code = errno.ENOTDIR if key in self._files else errno.ENOENT
            _fail(NotDirectoryError, code, path)
        return self._children(key)

    def mode(self, path: str) -> int:
        """Mode a directory was created with."""
        key = self._key(path)
        if key not in self._dirs:
            _fail(NotDirectoryError, errno.ENOENT, path)
        return self._dirs[key]


default_filesystem = OsFilesystem()


def resolve_filesystem(fs: Optional[Filesystem] = None) -> Filesystem:
    return default_filesystem if fs is None else fs
