"""Tests for trellis side resolution."""

from __future__ import annotations

import pytest

from gardenflow.core.constants import Side
from gardenflow.core.trellis import (
    opposite_trellis_side,
    resolve_trellis_side,
    trellis_assignment_errors,
    trellis_sides_for_bed,
)


@pytest.mark.parametrize(
    "label, expected",
    [("side1", Side.TOP), ("side2", Side.RIGHT), ("side3", Side.BOTTOM), ("side4", Side.LEFT)],
)
def test_square_bed_sides(label: str, expected: Side) -> None:
    resolved = resolve_trellis_side(5, 5, label)
    assert resolved.side == expected
    assert resolved.is_long_side


@pytest.mark.parametrize(
    "label, expected, is_long",
    [
        ("long1", Side.LEFT, True),
        ("long2", Side.RIGHT, True),
        ("short1", Side.TOP, False),
        ("short2", Side.BOTTOM, False),
    ],
)
def test_tall_bed_sides(label: str, expected: Side, is_long: bool) -> None:
    resolved = resolve_trellis_side(4, 8, label)
    assert resolved.side == expected
    assert resolved.is_long_side is is_long


def test_wide_bed_sides() -> None:
    assert resolve_trellis_side(8, 4, "long1").side == Side.TOP
    assert resolve_trellis_side(8, 4, "long2").side == Side.BOTTOM
    assert resolve_trellis_side(8, 4, "short1").side == Side.LEFT
    assert resolve_trellis_side(8, 4, "short2").side == Side.RIGHT


def test_rectangle_labels_on_square_bed() -> None:
    assert resolve_trellis_side(4, 4, "long1").side == Side.TOP
    assert resolve_trellis_side(4, 4, "short1").side == Side.RIGHT
    assert resolve_trellis_side(4, 4, "long2").side == Side.BOTTOM
    assert resolve_trellis_side(4, 4, "short2").side == Side.LEFT


def test_compass_labels() -> None:
    north = resolve_trellis_side(8, 4, "N")
    assert north.side == Side.TOP
    assert north.is_long_side
    east = resolve_trellis_side(8, 4, "E")
    assert east.side == Side.RIGHT
    assert not east.is_long_side
    assert resolve_trellis_side(5, 5, "W").side == Side.LEFT


def test_unknown_label_falls_back_to_top() -> None:
    assert resolve_trellis_side(4, 8, "bogus").side == Side.TOP
    assert resolve_trellis_side(5, 5, None).side == Side.TOP


def test_opposite_sides() -> None:
    assert opposite_trellis_side("long1") == "long2"
    assert opposite_trellis_side("short2") == "short1"
    assert opposite_trellis_side("side2") == "side4"
    assert opposite_trellis_side("N") == "S"
    assert opposite_trellis_side("bogus") == "long1"
    assert opposite_trellis_side(None) == "long1"


def test_opposite_side_faces_the_other_way() -> None:
    for width, length in [(4, 8), (8, 4), (5, 5)]:
        for label, _ in trellis_sides_for_bed(width, length):
            side = resolve_trellis_side(width, length, label).side
            other = resolve_trellis_side(width, length, opposite_trellis_side(label)).side
            assert {side, other} in ({Side.TOP, Side.BOTTOM}, {Side.LEFT, Side.RIGHT})


def test_sides_for_bed_shape() -> None:
    assert [label for label, _ in trellis_sides_for_bed(4, 4)] == ["side1", "side2", "side3", "side4"]
    assert [label for label, _ in trellis_sides_for_bed(4, 8)] == ["long1", "long2", "short1", "short2"]


def test_trellis_assignment_errors() -> None:
    assert trellis_assignment_errors(None, None, 4, 8) == []
    assert len(trellis_assignment_errors(None, "long1", 4, 8)) == 1
    assert trellis_assignment_errors("tunnel", None, 4, 8) == ["Trellis has no side assigned"]
    assert len(trellis_assignment_errors("tunnel", "side1", 4, 8)) == 1
    assert trellis_assignment_errors("tunnel", "N", 4, 8) == []
    assert trellis_assignment_errors("arch", "long2", 4, 8) == []


@pytest.mark.parametrize("label, expected", [("N", "S"), ("S", "N"), ("E", "W"), ("W", "E")])
def test_compass_labels_have_compass_opposites(label: str, expected: str) -> None:
    assert opposite_trellis_side(label) == expected
    side = resolve_trellis_side(8, 4, label).side
    other = resolve_trellis_side(8, 4, expected).side
    assert {side, other} in ({Side.TOP, Side.BOTTOM}, {Side.LEFT, Side.RIGHT})
