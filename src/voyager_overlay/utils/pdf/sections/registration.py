from __future__ import annotations

from voyager_overlay.core.models.geometry import BLACK, Coord, Dimensions, RegistrationGeometry
from voyager_overlay.utils.pdf.core.content_stream import ContentStream


def render_registration(page_width: float, page_height: float, geom: RegistrationGeometry) -> str:
    """Cutter registration marks around the cut area, in page inches."""
    cs = ContentStream(push_graphics_state=True)
    cs.set_line_width(geom.line_width_in)
    cs.set_color_space("DeviceRGB", True, True)
    cs.set_color(BLACK, True, True)

    left = geom.inset_left_in
    right = page_width - geom.inset_right_in
    top = page_height - geom.inset_top_in
    bottom = geom.inset_bottom_in
    length = geom.line_length_in

    # filled square, top left
    cs.move_to(Coord(left, top))
    cs.rect(Dimensions(geom.square_size_in, geom.square_size_in))
    cs.path_close_fill_stroke()

    # right angle, bottom left
    cs.move_to(Coord(left, bottom + length))
    cs.line_to(Coord(left, bottom))
    cs.line_to(Coord(left + length, bottom))
    cs.path_stroke()

    # right angle, top right
    cs.move_to(Coord(right - length, top))
    cs.line_to(Coord(right, top))
    cs.line_to(Coord(right, top - length))
    cs.path_stroke()

    return str(cs)
