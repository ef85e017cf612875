"""Platform layouts of the raw ``struct dirent`` produced by ``readdir(3)``.

Linux and macOS lay the record out differently (field set and name
capacity), so each ABI is a :class:`DirentLayout` subclass registered under
the ``sys.platform`` value it belongs to. The layout for the running
interpreter is chosen once, by :func:`native_layout`; records are never
inspected to guess their shape.
"""

import ctypes
import os
import sys
from enum import IntEnum
from functools import lru_cache
from typing import Optional, Sequence

from attrs import define, field
from autoregistry import Registry

from .exceptions import FeatureUnavailableError


class EntryType(IntEnum):
    """``DT_*`` values of ``d_type``; identical on Linux and macOS."""

    UNKNOWN = 0
    FIFO = 1
    CHR = 2
    DIR = 4
    BLK = 6
    REG = 8
    LNK = 10
    SOCK = 12
    WHT = 14


def _entry_type_converter(value) -> EntryType:
    try:
        return EntryType(value)
    except ValueError:
        return EntryType.UNKNOWN


@define(frozen=True)
class DirEntry:
    """A decoded directory entry.

    Parameters
    ----------
    name: str
        Entry name, decoded with the filesystem encoding.
    inode: int
        Inode number reported by the directory stream.
    type: EntryType
        File type hint. Filesystems that do not fill ``d_type`` report
        ``EntryType.UNKNOWN``.
    """

    name: str
    inode: int = 0
    type: EntryType = field(default=EntryType.UNKNOWN, converter=_entry_type_converter)

    @property
    def mode(self) -> int:
        """``stat``-style file type bits, e.g. ``0x4000`` for a directory."""
        return int(self.type) << 12

    def is_dir(self) -> bool:
        return self.type == EntryType.DIR

    def is_file(self) -> bool:
        return self.type == EntryType.REG

    def is_symlink(self) -> bool:
        return self.type == EntryType.LNK


class LinuxDirent(ctypes.Structure):
    """``struct dirent`` as laid out by glibc and musl."""

    _fields_ = [
        ("d_ino", ctypes.c_uint64),
        ("d_off", ctypes.c_int64),
        ("d_reclen", ctypes.c_uint16),
        ("d_type", ctypes.c_uint8),
        ("d_name", ctypes.c_char * 256),
    ]


class DarwinDirent(ctypes.Structure):
    """``struct dirent`` of the macOS 64-bit inode ABI."""

    _fields_ = [
        ("d_ino", ctypes.c_uint64),
        ("d_seekoff", ctypes.c_uint64),
        ("d_reclen", ctypes.c_uint16),
        ("d_namlen", ctypes.c_uint16),
        ("d_type", ctypes.c_uint8),
        ("d_name", ctypes.c_char * 1024),
    ]


def decode_name(raw) -> bytes:
    """Name bytes of a raw record, up to the first NUL.

    ctypes reads a ``c_char`` array field as ``bytes`` cut at the first NUL,
    or at the array capacity when no NUL is present, so a short record is
    never read past its terminator.
    """
    return raw.d_name


def _bind(libc, symbols: Sequence[str], restype, argtypes):
    """Return the first of ``symbols`` exported by ``libc``."""
    for symbol in symbols:
        try:
            func = libc[symbol]
        except AttributeError:
            continue
        func.restype = restype
        func.argtypes = argtypes
        return func
    raise FeatureUnavailableError(f"libc exports none of {', '.join(symbols)}.")


class DirentLayout(Registry, suffix="Layout"):
    """Directory-stream functions bound for one ``struct dirent`` ABI.

    Subclasses are looked up by platform, e.g. ``DirentLayout["linux"]``.
    """

    struct: type = ctypes.Structure
    opendir_symbols: Sequence[str] = ("opendir",)
    readdir_symbols: Sequence[str] = ("readdir",)
    closedir_symbols: Sequence[str] = ("closedir",)

    def __init__(self, libc: Optional[ctypes.CDLL] = None):
        if libc is None:
            libc = ctypes.CDLL(None, use_errno=True)
        self._opendir = _bind(libc, self.opendir_symbols, ctypes.c_void_p, [ctypes.c_char_p])
        self._readdir = _bind(libc, self.readdir_symbols, ctypes.POINTER(self.struct), [ctypes.c_void_p])
        self._closedir = _bind(libc, self.closedir_symbols, ctypes.c_int, [ctypes.c_void_p])

    def opendir(self, path: bytes) -> Optional[int]:
        """Open a directory stream; ``None`` on failure (see ``ctypes.get_errno``)."""
        return self._opendir(path)

    def readdir(self, dirp: int):
        """Next raw record, or ``None`` at end of stream."""
        ptr = self._readdir(dirp)
        if not ptr:
            return None
        return ptr.contents

    def closedir(self, dirp: int) -> int:
        return self._closedir(dirp)

    def decode(self, raw) -> DirEntry:
        return DirEntry(os.fsdecode(decode_name(raw)), raw.d_ino, raw.d_type)


class LinuxLayout(DirentLayout):
    struct = LinuxDirent
    readdir_symbols = ("readdir64", "readdir")


class DarwinLayout(DirentLayout):
    struct = DarwinDirent
    # x86_64 keeps the 32-bit inode ABI under the plain names.
    opendir_symbols = ("opendir$INODE64", "opendir")
    readdir_symbols = ("readdir$INODE64", "readdir")


def is_supported_platform(platform: Optional[str] = None) -> bool:
    """Whether a :class:`DirentLayout` is registered for ``platform``.

    Defaults to the running platform.
    """
    if platform is None:
        platform = sys.platform
    try:
        DirentLayout[platform]
    except KeyError:
        return False
    return True


@lru_cache
def native_layout() -> DirentLayout:
    """Layout of the running platform, bound to the process' libc."""
    try:
        layout_cls = DirentLayout[sys.platform]
    except KeyError:
        raise FeatureUnavailableError(
            f'Directory listing requires a POSIX directory stream; platform "{sys.platform}" is not supported.'
        ) from None
    return layout_cls()
