from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Coord:
    """Point in the caller's unit (inches for everything in this package)."""

    x: float
    y: float


@dataclass(frozen=True)
class Dimensions:
    """Signed extents; positive height grows downward from the origin corner."""

    width: float
    height: float


@dataclass(frozen=True)
class Color:
    """RGB color, each channel in 0-1 space."""

    r: float
    g: float
    b: float


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)


class FillRule(Enum):
    NONZERO_WINDING = "nonzero"
    EVEN_ODD = "evenodd"


class HorizontalAlignment(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class RegistrationGeometry:
    """Cutter registration marks (inches)."""

    inset_left_in: float
    inset_right_in: float
    inset_top_in: float
    inset_bottom_in: float

    square_size_in: float
    line_length_in: float
    line_width_in: float


@dataclass(frozen=True)
class OverlayGeometry:
    """Overlay outline and key grid (inches)."""

    width_in: float
    height_in: float
    corner_radius_in: float

    key_col_pitch_in: float
    key_row_pitch_in: float
    key_row_1_offset_in: float

    key_width_in: float
    key_height_in: float
    key_corner_radius_in: float
