from dirops import ops
from dirops.cli.common import ModeStr, PathArg, handle_errors, resolve_mode
from dirops.project import load_config


def mkdir(path: PathArg, *, mode: ModeStr = None):
    """Create a single directory; its parent must already exist."""
    with handle_errors():
        config = load_config()
        ops.mkdir(path, resolve_mode(mode, config))
