from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TileLayout:
    """How many items fit in a span and how they are spaced."""

    count: int
    item_height: float
    gap: float
    offset: float = 0.0  # from the span top to the first item

    @property
    def pitch(self) -> float:
        return self.item_height + self.gap


def usable_span(page_height: float, top_inset: float, bottom_inset: float) -> tuple[float, float]:
    """Top and bottom of the usable span, both measured down from the page top."""
    return top_inset, page_height - bottom_inset


def compute_tile_layout(available: float, item_height: float, min_gap: float) -> TileLayout:
    """
    Estimate the item count, drop one item if the estimated gap is below
    ``min_gap``, then spread the rest evenly.

    A single item is centred in the span with no gap; when nothing fits the
    layout is empty.
    """
    if item_height <= 0 or available < item_height:
        logger.debug("no tiles: available=%g item_height=%g", available, item_height)
        return TileLayout(count=0, item_height=item_height, gap=0.0)

    count = int(math.floor(available / item_height))
    if count > 1:
        estimate = available - (count * item_height) / (count - 1)
        if estimate < min_gap:
            count -= 1

    if count == 1:
        offset = (available - item_height) / 2.0
        logger.debug("single tile centred, offset=%g", offset)
        return TileLayout(count=1, item_height=item_height, gap=0.0, offset=offset)

    gap = (available - count * item_height) / (count - 1)
    logger.debug("tiles: count=%d gap=%g (available=%g)", count, gap, available)
    return TileLayout(count=count, item_height=item_height, gap=gap)


def tile_tops(layout: TileLayout, usable_top: float) -> Iterator[float]:
    for i in range(layout.count):
        yield usable_top + layout.offset + i * layout.pitch
