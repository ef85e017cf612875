# Don't manually change, let the release workflow handle it.
__version__ = "0.0.0"

__all__ = [
    "DEFAULT_MODE",
    "CreateFailedError",
    "DirEntry",
    "DirectoryHandle",
    "DiropsException",
    "EntryType",
    "FeatureUnavailableError",
    "Filesystem",
    "FilesystemError",
    "InvalidModeError",
    "MemoryFilesystem",
    "NotDirectoryError",
    "OpenFailedError",
    "OsFilesystem",
    "RemoveFailedError",
    "listdir",
    "makedirs",
    "mkdir",
    "remove",
    "removedirs",
    "rmdir",
    "scandir",
    "unlink",
]
import sys

from .dirent import DirEntry, EntryType, is_supported_platform
from .exceptions import (
    CreateFailedError,
    DiropsException,
    FeatureUnavailableError,
    FilesystemError,
    InvalidModeError,
    NotDirectoryError,
    OpenFailedError,
    RemoveFailedError,
)
from .filesystem import DEFAULT_MODE, Filesystem, MemoryFilesystem, OsFilesystem
from .ops import mkdir, remove, rmdir, unlink
from .tree import makedirs, removedirs

if is_supported_platform():
    from .dirhandle import DirectoryHandle, listdir, scandir
else:
    _NATIVE_NAMES = frozenset(("DirectoryHandle", "listdir", "scandir"))

    def __getattr__(name):
        if name in _NATIVE_NAMES:
            raise FeatureUnavailableError(
                f'"{name}" requires a POSIX directory stream; platform "{sys.platform}" is not supported.'
            )
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
