class DiropsException(Exception):  # noqa: N818
    """Root dirops exception class."""


class FeatureUnavailableError(DiropsException):
    """Feature unavailable on this platform."""


class FilesystemError(DiropsException, OSError):
    """The operating system refused a filesystem operation.

    Constructed like :class:`OSError`, so ``errno``, ``strerror`` and
    ``filename`` are populated and callers may catch either type.
    """


class NotDirectoryError(FilesystemError):
    """Listing target does not exist or is not a directory."""


class OpenFailedError(FilesystemError):
    """Unable to open a directory stream."""


class CreateFailedError(FilesystemError):
    """Unable to create a directory (or, in the memory backend, a file)."""


class RemoveFailedError(FilesystemError):
    """Unable to remove a file or directory."""


class InvalidModeError(DiropsException, ValueError):
    """Permission mode is not an octal number in ``0o0``-``0o7777``."""
