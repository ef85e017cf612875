"""``[tool.dirops]`` settings from the nearest ``pyproject.toml``."""

from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

import tomli

from dirops.models import DiropsConfig


def find_pyproject(start: Optional[Union[str, Path]] = None) -> Path:
    """Nearest ``pyproject.toml`` in ``start`` (default: cwd) or any parent."""
    start = Path.cwd() if start is None else Path(start).absolute()
    for directory in (start, *start.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    raise FileNotFoundError(f'Cannot find a pyproject.toml in "{start}" or any parent directory.')


@lru_cache
def load_config() -> DiropsConfig:
    """Load ``[tool.dirops]``; defaults when there is no ``pyproject.toml``.

    Cached for the life of the process; call ``load_config.cache_clear()``
    after changing directory or editing the file.
    """
    try:
        pyproject_path = find_pyproject()
    except FileNotFoundError:
        return DiropsConfig()

    with pyproject_path.open("rb") as f:
        toml = tomli.load(f)
    return DiropsConfig(**toml.get("tool", {}).get("dirops", {}))
