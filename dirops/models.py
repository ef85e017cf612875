"""Pydantic models for validating dirops configuration."""

from typing import List

from pydantic import BaseModel as PydanticBaseModel
from pydantic import ConfigDict, field_validator

from .filesystem import DEFAULT_MODE
from .utils import parse_mode


class BaseModel(PydanticBaseModel):
    model_config = ConfigDict(frozen=True)


class DiropsConfig(BaseModel):
    """Schema of the ``[tool.dirops]`` table in ``pyproject.toml``."""

    mode: int = DEFAULT_MODE
    """Default mode for directories created by the CLI."""

    exist_ok: bool = False
    """Default of ``dirops makedirs --exist-ok``."""

    ignore: List[str] = []
    """Gitwildmatch patterns hidden by ``dirops ls``."""

    @field_validator("mode", mode="before")
    @classmethod
    def _parse_mode(cls, v):
        return parse_mode(v)
