import math

import pytest

from voyager_overlay.core.calculations.tiling import TileLayout, compute_tile_layout, tile_tops, usable_span


def test_five_items_fill_the_span():
    layout = compute_tile_layout(10.0, 2.0, 0.5)
    assert layout.count == 5
    assert layout.gap == pytest.approx((10.0 - 5 * 2.0) / 4)
    assert layout.offset == 0.0


def test_two_items_keep_exact_minimum_gap():
    layout = compute_tile_layout(9.0, 4.0, 1.0)
    assert layout.count == 2
    assert layout.gap == pytest.approx(1.0)


def test_gap_check_can_drop_to_single_centred_item():
    layout = compute_tile_layout(5.0, 2.4, 2.0)
    assert layout.count == 1
    assert layout.gap == 0.0
    assert not math.isnan(layout.offset)
    assert layout.offset == pytest.approx((5.0 - 2.4) / 2)
    assert list(tile_tops(layout, 1.0)) == pytest.approx([1.0 + 1.3])


def test_single_item_from_the_start_is_centred():
    layout = compute_tile_layout(3.0, 2.0, 0.1)
    assert layout == TileLayout(count=1, item_height=2.0, gap=0.0, offset=0.5)


@pytest.mark.parametrize("available, item_height", [(1.0, 2.0), (5.0, 0.0), (5.0, -1.0)])
def test_nothing_fits(available, item_height):
    layout = compute_tile_layout(available, item_height, 0.1)
    assert layout.count == 0
    assert list(tile_tops(layout, 0.0)) == []


def test_letter_page_with_hp_overlays():
    top, bottom = usable_span(11.0, 0.625 + 0.1, 1.024 + 0.1)
    assert (top, bottom) == pytest.approx((0.725, 9.876))
    layout = compute_tile_layout(bottom - top, 2.10, 0.1)
    assert layout.count == 4
    assert layout.gap == pytest.approx((9.151 - 4 * 2.10) / 3)
    tops = list(tile_tops(layout, top))
    assert tops[0] == pytest.approx(top)
    assert tops[-1] + 2.10 == pytest.approx(bottom)


def test_tile_tops_step_by_pitch():
    layout = TileLayout(count=3, item_height=2.0, gap=1.0)
    assert layout.pitch == 3.0
    assert list(tile_tops(layout, 0.5)) == [0.5, 3.5, 6.5]
