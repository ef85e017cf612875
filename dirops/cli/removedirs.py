from dirops import tree
from dirops.cli.common import PathArg, handle_errors


def removedirs(path: PathArg):
    """Remove an empty directory, then each parent that is left empty."""
    with handle_errors():
        tree.removedirs(path)
