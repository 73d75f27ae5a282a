from __future__ import annotations

from pathlib import Path
from typing import Union


class SocialNetError(Exception):
    """
    Base class for errors raised by socialnet.
    """


class LoadError(SocialNetError):
    """
    The network source could not be opened or read.

    Aborts the whole load; nothing from the source is applied.
    """

    def __init__(self, path: Union[str, Path], reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"cannot load network from {self.path}: {reason}")


class LineParseError(SocialNetError):
    """
    A single node or edge line did not have its expected shape.

    Recovered locally by the loader: the line is dropped and loading continues.
    """

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"line {line_number}: {reason} ({line!r})")
