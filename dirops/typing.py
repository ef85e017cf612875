from os import PathLike
from typing import Union

PathType = Union[str, PathLike]
