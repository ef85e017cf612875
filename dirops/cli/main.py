import logging

from cyclopts import App

from dirops.cli.ls import ls
from dirops.cli.makedirs import makedirs
from dirops.cli.mkdir import mkdir
from dirops.cli.removedirs import removedirs
from dirops.cli.rm import rm
from dirops.cli.rmdir import rmdir
from dirops.utils import env_parse_bool

app = App(version_flags=("--version", "-v"), help_format="markdown")
app.command(ls)
app.command(makedirs)
app.command(mkdir)
app.command(removedirs)
app.command(rm)
app.command(rmdir)


def run_app(*args, **kwargs):
    """Entry point of the ``dirops`` console script.

    Set ``DIROPS_DEBUG=1`` to log the tree operations' recovered failures.
    """
    if env_parse_bool("DIROPS_DEBUG"):
        logging.basicConfig(level=logging.DEBUG)
    app(*args, **kwargs)
