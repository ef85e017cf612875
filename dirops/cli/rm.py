from dirops import ops
from dirops.cli.common import PathArg, handle_errors


def rm(path: PathArg):
    """Remove a file."""
    with handle_errors():
        ops.remove(path)
