import os
from typing import Union

from .exceptions import InvalidModeError


def env_parse_bool(env_var, default_value=False):
    if env_var in os.environ:
        env_value = os.environ[env_var].lower()
        return env_value == "true" or env_value == "1"
    else:
        return default_value


def parse_mode(value: Union[int, str]) -> int:
    """Interpret a permission mode.

    Integers pass through unchanged. Strings are always read as octal,
    with or without a ``0o`` prefix, the way ``chmod`` reads them.

    Raises
    ------
    InvalidModeError
        Not an octal number, or outside ``0o0``-``0o7777``.

    Examples
    --------
    >>> parse_mode(0o755)
    493
    >>> parse_mode("755")
    493
    >>> parse_mode("0o700")
    448
    """
    if isinstance(value, bool):
        raise InvalidModeError(f"Invalid mode {value!r}.")
    if isinstance(value, int):
        mode = value
    elif isinstance(value, str):
        text = value.strip().lower()
        if text.startswith("0o"):
            text = text[2:]
        try:
            mode = int(text, 8)
        except ValueError:
            raise InvalidModeError(f"Invalid mode {value!r}; expected an octal number like 755.") from None
    else:
        raise InvalidModeError(f"Invalid mode {value!r}.")
    if not 0 <= mode <= 0o7777:
        raise InvalidModeError(f"Mode {oct(mode)} is out of range.")
    return mode
