from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RenderMode(Enum):
    """Output type selected on the command line; the value ends up in the file name."""

    CUT = "cut"
    PRINT = "print"
    ALL = "all"


@dataclass(frozen=True)
class RenderOptions:
    show_outlines: bool = False
    show_reg_marks: bool = False
    show_legends: bool = False

    @classmethod
    def for_mode(cls, mode: RenderMode) -> "RenderOptions":
        if mode is RenderMode.CUT:
            return cls(show_outlines=True)
        if mode is RenderMode.PRINT:
            return cls(show_reg_marks=True, show_legends=True)
        return cls(show_outlines=True, show_reg_marks=True, show_legends=True)
