from __future__ import annotations

from typing import Mapping

from voyager_overlay.core.models.geometry import BLACK, Coord, Dimensions, HorizontalAlignment, OverlayGeometry
from voyager_overlay.utils.pdf.core.content_stream import ContentStream, escape_pdf_text
from voyager_overlay.utils.pdf.core.layout_common import (
    ENTER_KEY_COL,
    KEY_COLS,
    KEY_ROWS,
    LEGEND_FONT,
    LEGEND_FONT_SIZE_PT,
    LEGEND_X_ADJUST_IN,
    LEGEND_Y_ADJUST_IN,
    MM_PER_IN,
    OVERLAY_LINE_WIDTH_MM,
    PT_PER_IN,
)
from voyager_overlay.utils.pdf.core.legends import LEGENDS, legend_for, user_key_code


def key_left(geom: OverlayGeometry, col: int) -> float:
    """Left edge of a key; the grid is centred on the overlay."""
    return (
        geom.width_in / 2.0
        - (KEY_COLS / 2) * geom.key_col_pitch_in
        + (geom.key_col_pitch_in - geom.key_width_in) / 2.0
        + col * geom.key_col_pitch_in
    )


def render_overlay(
    geom: OverlayGeometry,
    show_outlines: bool,
    show_legends: bool,
    legends: Mapping[int, str] = LEGENDS,
) -> str:
    """One overlay in local inches, origin at its bottom left."""
    cs = ContentStream(push_graphics_state=True)
    cs.set_line_width(OVERLAY_LINE_WIDTH_MM / MM_PER_IN)
    cs.set_color(BLACK, False, True)

    if show_outlines:
        cs.move_to(Coord(0.0, geom.height_in))
        cs.rounded_rect(Dimensions(geom.width_in, geom.height_in), geom.corner_radius_in)
        cs.path_close_stroke()

    for row in range(KEY_ROWS):
        y = geom.height_in - (row * geom.key_row_pitch_in + geom.key_row_1_offset_in)
        for col in range(KEY_COLS):
            if row == KEY_ROWS - 1 and col == ENTER_KEY_COL:
                continue  # lower half of ENTER
            key_height = geom.key_height_in
            if row == KEY_ROWS - 2 and col == ENTER_KEY_COL:
                key_height += geom.key_row_pitch_in
            x = key_left(geom, col)

            if show_outlines:
                cs.move_to(Coord(x, y))
                cs.rounded_rect(Dimensions(geom.key_width_in, key_height), geom.key_corner_radius_in)
                cs.path_close_stroke()

            if show_legends:
                label = legend_for(user_key_code(row, col), legends)
                cs.text(
                    Coord(x + geom.key_width_in / 2.0 - LEGEND_X_ADJUST_IN, y + LEGEND_Y_ADJUST_IN),
                    HorizontalAlignment.CENTER,
                    escape_pdf_text(label),
                    LEGEND_FONT,
                    LEGEND_FONT_SIZE_PT / PT_PER_IN,
                )

    return str(cs)
