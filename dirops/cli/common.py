import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated, Optional

from cyclopts import Parameter
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from dirops.exceptions import DiropsException
from dirops.models import DiropsConfig
from dirops.utils import parse_mode

console = Console()
error_console = Console(stderr=True)

# Custom annotated types for consistent CLI parameter help
PathArg = Annotated[Path, Parameter(help="Path to operate on.")]
ModeStr = Annotated[
    Optional[str],
    Parameter(help='Permission bits in octal, like "755". Defaults to the configured mode.'),
]


@contextmanager
def handle_errors():
    """Print dirops errors as a single line on stderr and exit with status 1."""
    try:
        yield
    except DiropsException as e:
        _print_error(str(e))
        sys.exit(1)
    except ValidationError as e:
        details = "; ".join(f"{'.'.join(str(x) for x in err['loc'])}: {err['msg']}" for err in e.errors())
        _print_error(f"Invalid [tool.dirops] configuration: {details}")
        sys.exit(1)


def _print_error(message: str):
    error_console.print(f"[bold red]Error:[/bold red] {escape(message)}", soft_wrap=True, highlight=False)


def resolve_mode(mode: Optional[str], config: DiropsConfig) -> int:
    if mode is None:
        return config.mode
    return parse_mode(mode)
