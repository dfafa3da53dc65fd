"""Tests for the bed spacing policy."""

from __future__ import annotations

from gardenflow.core.garden import Bed
from gardenflow.core.spacing import beds_are_end_to_end, beds_have_facing_connectors, required_spacing
from gardenflow.core.validation import has_collision


def _bed(bed_id: str, x: float, y: float, width: float = 4, length: float = 8, **kwargs) -> Bed:
    return Bed(id=bed_id, name=bed_id, x=x, y=y, width=width, length=length, **kwargs)


def test_end_to_end_beds_need_no_gap() -> None:
    a = _bed("a", 0, 0)
    b = _bed("b", 0, 8)
    assert beds_are_end_to_end(a, b)
    assert beds_are_end_to_end(b, a)
    assert required_spacing(a, b, 4) == 0.0
    assert not has_collision(b, [a], walkway_width=4)


def test_horizontal_row_is_end_to_end() -> None:
    a = _bed("a", 0, 0, width=8, length=4)
    b = _bed("b", 8, 0, width=8, length=4)
    assert beds_are_end_to_end(a, b)


def test_square_neighbours_are_not_a_row() -> None:
    a = _bed("a", 0, 0, width=4, length=4)
    b = _bed("b", 4, 0, width=4, length=4)
    assert not beds_are_end_to_end(a, b)
    assert required_spacing(a, b, 3) == 3.0


def test_side_by_side_long_beds_are_not_a_row() -> None:
    a = _bed("a", 0, 0)
    b = _bed("b", 4, 0)
    assert not beds_are_end_to_end(a, b)


def test_misaligned_beds_are_not_end_to_end() -> None:
    a = _bed("a", 0, 0)
    b = _bed("b", 1, 8)
    assert not beds_are_end_to_end(a, b)


def test_facing_connectors_use_connector_spacing() -> None:
    a = _bed("a", 0, 0, trellis="tunnel", trellis_side="long2")
    b = _bed("b", 7, 0, trellis="tunnel", trellis_side="long1")
    assert beds_have_facing_connectors(a, b)
    assert beds_have_facing_connectors(b, a)
    assert required_spacing(a, b, 4) == 3.0
    assert not has_collision(b, [a], walkway_width=4)
    assert has_collision(_bed("b", 6.5, 0, trellis="tunnel", trellis_side="long1"), [a], walkway_width=4)


def test_vertical_facing_connectors() -> None:
    a = _bed("a", 0, 0, width=8, length=4, trellis="arbor", trellis_side="long2")
    b = _bed("b", 0, 7, width=8, length=4, trellis="cattle_panel", trellis_side="long1")
    assert beds_have_facing_connectors(a, b)


def test_connectors_facing_away_use_walkway() -> None:
    a = _bed("a", 0, 0, trellis="tunnel", trellis_side="long1")
    b = _bed("b", 7, 0, trellis="tunnel", trellis_side="long1")
    assert not beds_have_facing_connectors(a, b)
    assert required_spacing(a, b, 4) == 4.0


def test_attachment_trellises_use_walkway() -> None:
    a = _bed("a", 0, 0, trellis="arch", trellis_side="long2")
    b = _bed("b", 7, 0, trellis="arch", trellis_side="long1")
    assert not beds_have_facing_connectors(a, b)
    assert required_spacing(a, b, 4) == 4.0


def test_beds_joined_on_long_edges_are_not_a_row() -> None:
    # Rows join on narrow ends only; wide beds stacked long edge to long edge
    # still need the walkway between them.
    a = _bed("a", 0, 0, width=8, length=4)
    b = _bed("b", 0, 4, width=8, length=4)
    assert not beds_are_end_to_end(a, b)
    assert required_spacing(a, b, 4) == 4.0
    assert has_collision(b, [a], walkway_width=4)
    assert not has_collision(_bed("b", 0, 8, width=8, length=4), [a], walkway_width=4)
