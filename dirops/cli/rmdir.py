from dirops import ops
from dirops.cli.common import PathArg, handle_errors


def rmdir(path: PathArg):
    """Remove an empty directory."""
    with handle_errors():
        ops.rmdir(path)
