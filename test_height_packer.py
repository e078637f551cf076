"""Tests for the shelf packer."""

import itertools
import logging

import pytest

from rectpack_core import (HeightRectPacker, PackerConfig, PackingError, PlacementMode,
                           Rectangle, Size, pack)


SPRITES = [Size(w, h) for w, h in [
    (10, 4), (3, 7), (8, 8), (5, 5), (12, 3), (1, 1), (6, 2), (9, 6), (4, 4), (7, 3),
]]

CORRECTED = PlacementMode.CORRECTED


def test_two_rectangles_share_one_row():
    result = pack([Size(4, 2), Size(4, 2)])
    assert len(result.rectangles) == 2
    assert len({r.y for r in result.rectangles}) == 1
    assert result.size.height == 2
    assert result.packing_ratio == pytest.approx(1.0)


def test_compatible_placement_records_cursor_after_advance():
    result = pack([Size(4, 2), Size(4, 2)])
    assert result.rectangles == [Rectangle(4, 0, 4, 2), Rectangle(8, 0, 4, 2)]
    assert result.size == Size(8, 2)


def test_compatible_placement_with_padding():
    # Row width: max(3 * 2, 5 + 2) + 2 * 2 = 11
    config = PackerConfig(rectangle_padding=1, border_padding=2)
    result = pack([Size(3, 3), Size(2, 2), Size(5, 1)], config)

    assert result.rectangles == [
        Rectangle(10, 3, 5, 1),
        # Wrapped rows restart at x=0 and drop by the incoming height
        Rectangle(4, 7, 2, 2),
        Rectangle(9, 7, 3, 3),
    ]
    assert result.size == Size(9, 10)


def test_corrected_placement_with_padding():
    config = PackerConfig(rectangle_padding=1, border_padding=2, placement=CORRECTED)
    result = pack([Size(3, 3), Size(2, 2), Size(5, 1)], config)

    assert result.rectangles == [
        Rectangle(3, 3, 5, 1),
        Rectangle(3, 6, 2, 2),
        Rectangle(3, 10, 3, 3),
    ]
    assert result.size == Size(10, 13)


def test_corrected_placement_two_rectangles():
    result = pack([Size(4, 2), Size(4, 2)], PackerConfig(placement=CORRECTED))
    assert result.rectangles == [Rectangle(0, 0, 4, 2), Rectangle(4, 0, 4, 2)]
    assert result.size == Size(8, 2)


@pytest.mark.parametrize("placement", list(PlacementMode))
def test_count_and_dimensions_preserved(placement):
    config = PackerConfig(rectangle_padding=1, border_padding=2, placement=placement)
    result = pack(SPRITES, config)

    assert len(result.rectangles) == len(SPRITES)
    # Placement order is the sorted input order
    assert [r.to_size() for r in result.rectangles] == sorted(SPRITES)


@pytest.mark.parametrize("padding,border", [(0, 0), (1, 0), (0, 3), (2, 1)])
def test_corrected_placement_is_contained_and_disjoint(padding, border):
    config = PackerConfig(rectangle_padding=padding, border_padding=border, placement=CORRECTED)
    result = pack(SPRITES, config)
    container = Rectangle(0, 0, result.size.width, result.size.height)

    for rect in result.rectangles:
        assert container.contains(rect)
        assert rect.x >= border + padding
        assert rect.y >= border + padding
    for a, b in itertools.combinations(result.rectangles, 2):
        assert not a.intersects(b)


def test_corrected_placement_within_max_size():
    config = PackerConfig(max_size=Size(30, 40), rectangle_padding=1, border_padding=1, placement=CORRECTED)
    result = pack(SPRITES, config)

    for rect in result.rectangles:
        assert rect.right + 1 + 1 <= 30
        assert rect.bottom + 1 + 1 <= 40


@pytest.mark.parametrize("placement", list(PlacementMode))
def test_input_order_does_not_matter(placement):
    config = PackerConfig(rectangle_padding=1, placement=placement)
    expected = pack(SPRITES, config)

    for permutation in (list(reversed(SPRITES)), SPRITES[3:] + SPRITES[:3], sorted(SPRITES)):
        assert pack(permutation, config) == expected


def test_empty_input():
    result = pack([], PackerConfig(rectangle_padding=1, border_padding=2))
    assert result.rectangles == []
    assert result.size == Size(3, 3)

    result = pack([])
    assert result.size == Size(0, 0)
    assert result.packing_ratio == 0.0


def test_empty_input_with_max_size():
    result = pack([], PackerConfig(max_size=Size(5, 5), placement=CORRECTED))
    assert result.rectangles == []
    assert result.size == Size(0, 0)


def test_zero_area_sizes_take_a_slot():
    result = pack([Size(0, 5), Size(0, 0)])
    assert result.rectangles == [Rectangle(0, 0, 0, 0), Rectangle(0, 0, 0, 5)]
    assert result.size == Size(0, 5)


def test_zero_area_sizes_consume_padding():
    config = PackerConfig(rectangle_padding=2, placement=CORRECTED)
    result = pack([Size(0, 0), Size(0, 0)], config)
    assert len(result.rectangles) == 2
    assert result.rectangles[0].x == 2


def test_preflight_rejection_before_placement():
    config = PackerConfig(max_size=Size(10, 10))
    with pytest.raises(PackingError) as excinfo:
        pack([Size(20, 5)], config)
    assert excinfo.value.partial_result.rectangles == []
    assert excinfo.value.partial_result.size == Size(0, 0)


def test_compatible_overflow_keeps_partial_result():
    config = PackerConfig(max_size=Size(10, 4))
    with pytest.raises(PackingError) as excinfo:
        pack([Size(6, 2)] * 3, config)

    partial = excinfo.value.partial_result
    assert partial.rectangles == [Rectangle(6, 0, 6, 2), Rectangle(6, 2, 6, 2)]
    assert partial.size == Size(0, 4)


def test_corrected_overflow_keeps_partial_result():
    config = PackerConfig(max_size=Size(10, 4), placement=CORRECTED)
    with pytest.raises(PackingError) as excinfo:
        pack([Size(6, 2)] * 3, config)

    partial = excinfo.value.partial_result
    assert partial.rectangles == [Rectangle(0, 0, 6, 2), Rectangle(0, 2, 6, 2)]
    assert partial.size == Size(0, 4)


def test_exact_fit_does_not_overflow():
    config = PackerConfig(max_size=Size(12, 4), placement=CORRECTED)
    result = pack([Size(6, 2)] * 4, config)
    assert result.size == Size(12, 4)
    assert result.packing_ratio == pytest.approx(1.0)


def test_packer_used_directly():
    packer = HeightRectPacker()
    result = packer.pack([Size(1, 1)], PackerConfig(placement=CORRECTED))
    assert result.rectangles == [Rectangle(0, 0, 1, 1)]


def test_row_width_never_narrower_than_widest_rectangle():
    result = pack([Size(50, 1), Size(1, 1), Size(1, 1)], PackerConfig(placement=CORRECTED))
    assert result.rectangles == [Rectangle(0, 0, 1, 1), Rectangle(1, 0, 1, 1), Rectangle(0, 1, 50, 1)]
    assert result.size == Size(50, 2)


def test_overflow_is_logged(caplog):
    config = PackerConfig(max_size=Size(10, 4))
    with caplog.at_level(logging.WARNING, logger='rectpack_core.height_packer'):
        with pytest.raises(PackingError):
            pack([Size(6, 2)] * 3, config)
    assert "2 of 3" in caplog.text
