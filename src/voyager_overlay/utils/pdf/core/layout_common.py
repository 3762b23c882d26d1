"""
Layout constants and device presets for overlay rendering.
All lengths are inches unless the name says otherwise.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from voyager_overlay.core.models.geometry import OverlayGeometry, RegistrationGeometry

MM_PER_IN = 25.4
PT_PER_IN = 72.0

# Page geometry (US letter)
LETTER_WIDTH_IN, LETTER_HEIGHT_IN = 8.5, 11.0
LETTER_WIDTH_PT, LETTER_HEIGHT_PT = LETTER_WIDTH_IN * PT_PER_IN, LETTER_HEIGHT_IN * PT_PER_IN

# Cut area of a Cameo 4 without mat
PAGE_INSET_LEFT_IN = 0.625
PAGE_INSET_RIGHT_IN = 0.625
PAGE_INSET_TOP_IN = 0.625
PAGE_INSET_BOTTOM_IN = 1.024

REG_MARK_SIZE_IN = 0.250
REG_MARK_LINE_WIDTH_MM = 0.5

# Tiling
OVERLAY_MINIMUM_Y_GAP_IN = 0.1
ADDITIONAL_INSET_IN = 0.1

# Overlay drawing
OVERLAY_LINE_WIDTH_MM = 0.1
KEY_ROWS, KEY_COLS = 4, 10
ENTER_KEY_COL = 5
LEGEND_FONT = "F1"
LEGEND_FONT_SIZE_PT = 6.0
LEGEND_X_ADJUST_IN = 0.125
LEGEND_Y_ADJUST_IN = 0.03

OUTPUT_DIR_ENV = "VOYAGER_OVERLAY_OUTPUT_DIR"


CAMEO4_NO_MAT_REG_GEOMETRY = RegistrationGeometry(
    inset_left_in=PAGE_INSET_LEFT_IN,
    inset_right_in=PAGE_INSET_RIGHT_IN,
    inset_top_in=PAGE_INSET_TOP_IN,
    inset_bottom_in=PAGE_INSET_BOTTOM_IN,
    square_size_in=REG_MARK_SIZE_IN,
    line_length_in=REG_MARK_SIZE_IN,
    line_width_in=REG_MARK_LINE_WIDTH_MM / MM_PER_IN,
)

HP_GEOMETRY = OverlayGeometry(
    width_in=4.65,
    height_in=2.10,
    corner_radius_in=0.025,
    key_col_pitch_in=0.45,
    key_row_pitch_in=0.50,
    key_row_1_offset_in=0.133,
    key_width_in=0.34,
    key_height_in=0.32,
    key_corner_radius_in=0.025,
)

SM_GEOMETRY = OverlayGeometry(
    width_in=4.75,
    height_in=1.95,
    corner_radius_in=0.025,
    key_col_pitch_in=0.475,
    key_row_pitch_in=0.475,
    key_row_1_offset_in=0.175,
    key_width_in=0.33,
    key_height_in=0.30,
    key_corner_radius_in=0.025,
)


@dataclass(frozen=True)
class DevicePreset:
    model: str  # used in the output file name
    geometry: OverlayGeometry


DEVICES = {
    "hp": DevicePreset(model="voyager", geometry=HP_GEOMETRY),
    "sm": DevicePreset(model="dm1xl", geometry=SM_GEOMETRY),
}
DEFAULT_DEVICE = "hp"


def default_output_path(model: str, mode: str) -> Path:
    name = f"{model}-overlay-{mode}.pdf"
    override = os.environ.get(OUTPUT_DIR_ENV)
    return Path(override) / name if override else Path(name)
