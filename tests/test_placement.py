"""Tests for the placement search."""

from __future__ import annotations

import pytest

from gardenflow.core.constants import ErrorKind
from gardenflow.core.garden import Bed
from gardenflow.core.placement import (
    Position,
    SnapResult,
    find_valid_position,
    place_new_bed,
    resize_bed,
    rotate_bed,
    snap_to_valid_position,
)


def _bed(bed_id: str, x: float = 0, y: float = 0, width: float = 4, length: float = 4, **kwargs) -> Bed:
    return Bed(id=bed_id, name=bed_id, x=x, y=y, width=width, length=length, **kwargs)


@pytest.mark.parametrize("width, length", [(1, 1), (4, 8), (20, 20)])
def test_empty_plot_places_at_origin(width: float, length: float) -> None:
    assert find_valid_position(_bed("a", 5, 5, width, length), [], 20, 20) == Position(0, 0)


def test_scan_keeps_walkway() -> None:
    existing = [_bed("a", 0, 0)]
    assert find_valid_position(_bed("b"), existing, 20, 20, 3) == Position(7.0, 0.0)


def test_fallback_scan_drops_walkway() -> None:
    existing = [_bed("a", 0, 0)]
    assert find_valid_position(_bed("b"), existing, 8, 4, 3) == Position(4.0, 0.0)


def test_full_plot_has_no_position() -> None:
    existing = [_bed("a", 0, 0, 5, 5)]
    assert find_valid_position(_bed("b", width=1, length=1), existing, 5, 5) is None


def test_snap_rounds_to_grid() -> None:
    bed = _bed("m", 3.2, 0.1)
    assert snap_to_valid_position(bed, [bed], 20, 20) == SnapResult(3.0, 0.0, True)


def test_snap_pulls_bed_inside_plot() -> None:
    bed = _bed("m", 18, -2)
    assert snap_to_valid_position(bed, [bed], 20, 20) == SnapResult(16.0, 0.0, True)


def test_snap_searches_outward_from_collision() -> None:
    other = _bed("o", 0, 0)
    moving = _bed("m", 3, 0)
    assert snap_to_valid_position(moving, [other, moving], 20, 20) == SnapResult(4.0, 0.0, True)


def test_snap_failure_returns_original_coordinates() -> None:
    other = _bed("o", 0, 0, 5, 5)
    moving = _bed("m", 1, 1)
    assert snap_to_valid_position(moving, [other], 5, 5) == SnapResult(1, 1, False)


def test_place_new_bed() -> None:
    outcome = place_new_bed(_bed("b", trellis_side="long1"), [_bed("a")], 20, 20, 3)
    assert outcome.ok
    assert (outcome.bed.x, outcome.bed.y) == (7.0, 0.0)
    assert outcome.bed.trellis_side is None


def test_place_new_bed_clamps_dimensions() -> None:
    outcome = place_new_bed(_bed("b", width=0.5, length=30), [], 30, 30)
    assert (outcome.bed.width, outcome.bed.length) == (1.0, 20.0)


def test_place_new_bed_too_large() -> None:
    outcome = place_new_bed(_bed("b", width=12, length=4), [], 10, 10)
    assert not outcome.ok
    assert outcome.error_kind == ErrorKind.DIMENSION_TOO_LARGE
    assert outcome.message == "Bed 12×4ft is larger than garden"


def test_place_new_bed_no_space() -> None:
    outcome = place_new_bed(_bed("b", width=1, length=1), [_bed("a", 0, 0, 5, 5)], 5, 5)
    assert outcome.bed is None
    assert outcome.error_kind == ErrorKind.NO_SPACE_FOUND
    assert outcome.message == "No space for 1×1ft bed"


def test_rotate_bed_stays_in_plot() -> None:
    bed = _bed("a", 16, 0, 4, 8, trellis="tunnel", trellis_side="long1")
    rotated = rotate_bed(bed, 20, 20)
    assert (rotated.x, rotated.y, rotated.width, rotated.length) == (12, 0, 8, 4)
    assert rotated.trellis_side == "long1"
    assert bed.width == 4


def test_resize_bed() -> None:
    bed = _bed("a", 0, 0)
    others = [bed, _bed("b", 7, 0)]
    unchanged, accepted = resize_bed(bed, 6, 4, others, 20, 20, 3)
    assert not accepted
    assert unchanged is bed
    resized, accepted = resize_bed(bed, 4, 6, others, 20, 20, 3)
    assert accepted
    assert resized.length == 6
