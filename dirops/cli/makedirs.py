from typing import Optional

from dirops import tree
from dirops.cli.common import ModeStr, PathArg, handle_errors, resolve_mode
from dirops.project import load_config


def makedirs(path: PathArg, *, mode: ModeStr = None, exist_ok: Optional[bool] = None):
    """Create a directory and any missing parents.

    Parameters
    ----------
    exist_ok : Optional[bool]
        Succeed if the directory already exists.
        Defaults to the configured ``exist_ok``.
    """
    with handle_errors():
        config = load_config()
        if exist_ok is None:
            exist_ok = config.exist_ok
        tree.makedirs(path, resolve_mode(mode, config), exist_ok=exist_ok)
