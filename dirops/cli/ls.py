from pathlib import Path
from typing import Annotated

from cyclopts import Parameter
from pathspec import PathSpec
from rich.markup import escape
from rich.table import Table

from dirops.cli.common import console, handle_errors
from dirops.dirent import DirEntry, EntryType
from dirops.project import load_config

_TYPE_CHARS = {
    EntryType.DIR: "d",
    EntryType.REG: "-",
    EntryType.LNK: "l",
    EntryType.FIFO: "p",
    EntryType.SOCK: "s",
    EntryType.CHR: "c",
    EntryType.BLK: "b",
    EntryType.WHT: "w",
}


def _match_name(directory: Path, entry: DirEntry) -> str:
    """Entry name as matched against ignore patterns; directories end with ``/``."""
    if entry.type is EntryType.UNKNOWN:
        # d_type is unset on some filesystems.
        is_dir = (directory / entry.name).is_dir()
    else:
        is_dir = entry.is_dir()
    return entry.name + "/" if is_dir else entry.name


def ls(
    path: Path = Path("."),
    *,
    show_all: Annotated[bool, Parameter(name=["--all", "-a"])] = False,
    long: Annotated[bool, Parameter(name=["--long", "-l"])] = False,
):
    """List directory contents, sorted by name.

    Parameters
    ----------
    path : Path
        Directory to list.
    show_all : bool
        Also show entries matched by the configured ``ignore`` patterns.
    long : bool
        Show entry type and inode number.
    """
    with handle_errors():
        from dirops import scandir

        config = load_config()
        entries = scandir(path)

    if not show_all and config.ignore:
        ignore_spec = PathSpec.from_lines("gitwildmatch", config.ignore)
        entries = [x for x in entries if not ignore_spec.match_file(_match_name(path, x))]
    entries.sort(key=lambda x: x.name)

    if not long:
        for entry in entries:
            console.print(escape(entry.name), soft_wrap=True, highlight=False)
        return

    table = Table(box=None, show_header=False, pad_edge=False)
    table.add_column("type")
    table.add_column("inode", justify="right")
    table.add_column("name")
    for entry in entries:
        table.add_row(_TYPE_CHARS.get(entry.type, "?"), str(entry.inode), escape(entry.name))
    console.print(table)
