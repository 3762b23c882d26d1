from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping

from voyager_overlay.core.calculations.tiling import compute_tile_layout, tile_tops, usable_span
from voyager_overlay.core.models.geometry import OverlayGeometry, RegistrationGeometry
from voyager_overlay.core.models.render_options import RenderOptions
from voyager_overlay.utils.pdf.core.builder import build_pdf_bytes
from voyager_overlay.utils.pdf.core.content_stream import ContentStream
from voyager_overlay.utils.pdf.core.layout_common import (
    ADDITIONAL_INSET_IN,
    LEGEND_FONT,
    LETTER_HEIGHT_IN,
    LETTER_HEIGHT_PT,
    LETTER_WIDTH_IN,
    LETTER_WIDTH_PT,
    OVERLAY_MINIMUM_Y_GAP_IN,
    PT_PER_IN,
)
from voyager_overlay.utils.pdf.core.legends import LEGENDS
from voyager_overlay.utils.pdf.sections.overlay import render_overlay
from voyager_overlay.utils.pdf.sections.registration import render_registration

logger = logging.getLogger(__name__)


def render_page_contents(
    page_width: float,
    page_height: float,
    reg_geom: RegistrationGeometry,
    geom: OverlayGeometry,
    options: RenderOptions,
    legends: Mapping[int, str] = LEGENDS,
    min_gap: float = OVERLAY_MINIMUM_Y_GAP_IN,
) -> str:
    """Content stream for one page: registration marks plus as many overlays as fit."""
    top, bottom = usable_span(
        page_height,
        reg_geom.inset_top_in + ADDITIONAL_INSET_IN,
        reg_geom.inset_bottom_in + ADDITIONAL_INSET_IN,
    )
    layout = compute_tile_layout(bottom - top, geom.height_in, min_gap)
    logger.debug("span top=%g bottom=%g count=%d gap=%g", top, bottom, layout.count, layout.gap)

    # scale to inches, origin at bottom left
    page = ContentStream(push_graphics_state=True)
    page.concat_matrix(PT_PER_IN, 0, 0, PT_PER_IN, 0, 0)

    if options.show_reg_marks:
        page.save_state()
        page.append(render_registration(page_width, page_height, reg_geom))
        page.restore_state()

    overlay = render_overlay(geom, options.show_outlines, options.show_legends, legends)
    left = (page_width - geom.width_in) / 2.0
    for index, tile_top in enumerate(tile_tops(layout, top)):
        # top-down distance to the PDF y of the overlay's bottom edge
        tile_y = page_height - (tile_top + geom.height_in)
        logger.debug("overlay %d: left=%g top=%g y=%g", index, left, tile_top, tile_y)
        tile = ContentStream(push_graphics_state=True)
        tile.translate(left, tile_y)
        tile.append(overlay)
        page.append(tile)

    return str(page)


def render_pdf(
    path: Path,
    reg_geom: RegistrationGeometry,
    geom: OverlayGeometry,
    options: RenderOptions,
    legends: Mapping[int, str] = LEGENDS,
) -> None:
    contents = render_page_contents(LETTER_WIDTH_IN, LETTER_HEIGHT_IN, reg_geom, geom, options, legends)
    pdf_bytes = build_pdf_bytes(
        [contents],
        page_size=(LETTER_WIDTH_PT, LETTER_HEIGHT_PT),
        font_name=LEGEND_FONT,
    )
    path.write_bytes(pdf_bytes)
    logger.info("wrote %s (%d bytes)", path, len(pdf_bytes))
