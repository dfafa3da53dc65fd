"""Required separation between two beds.

Three cases, checked in order:

1. End-to-end beds form one continuous row and need no gap.
2. Beds whose connector trellises face each other keep the fixed connector
   spacing, whatever the walkway width.
3. Everything else keeps the plot's walkway width.
"""

from __future__ import annotations

from typing import Mapping

from .catalog import TrellisType, is_connector_trellis
from .constants import CONNECTOR_SPACING, EDGE_TOLERANCE, Side
from .garden import Bed
from .trellis import resolve_trellis_side


def _close(a: float, b: float) -> bool:
    return abs(a - b) < EDGE_TOLERANCE


def beds_are_end_to_end(a: Bed, b: Bed) -> bool:
    """Return True if the beds join on a shared narrow edge.

    Vertically stacked beds must share x and width, horizontally stacked beds
    share y and length. At least one of them must run along the joining axis;
    two squares side by side are neighbours, not a row.
    """

    vertical = (
        _close(a.width, b.width)
        and _close(a.x, b.x)
        and (_close(a.y + a.length, b.y) or _close(b.y + b.length, a.y))
        and (a.length > a.width or b.length > b.width)
    )
    if vertical:
        return True
    return (
        _close(a.length, b.length)
        and _close(a.y, b.y)
        and (_close(a.x + a.width, b.x) or _close(b.x + b.width, a.x))
        and (a.width > a.length or b.width > b.length)
    )


def beds_have_facing_connectors(a: Bed, b: Bed, catalog: Mapping[str, TrellisType] | None = None) -> bool:
    """Return True if both beds carry connector trellises on the sides facing each other."""

    if not (is_connector_trellis(a.trellis, catalog) and is_connector_trellis(b.trellis, catalog)):
        return False
    if not a.trellis_side or not b.trellis_side:
        return False

    side_a = resolve_trellis_side(a.width, a.length, a.trellis_side).side
    side_b = resolve_trellis_side(b.width, b.length, b.trellis_side).side

    a_north_of_b = a.y + a.length <= b.y + EDGE_TOLERANCE
    a_south_of_b = b.y + b.length <= a.y + EDGE_TOLERANCE
    a_west_of_b = a.x + a.width <= b.x + EDGE_TOLERANCE
    a_east_of_b = b.x + b.width <= a.x + EDGE_TOLERANCE

    overlap_x = not (a.x + a.width <= b.x or b.x + b.width <= a.x)
    overlap_y = not (a.y + a.length <= b.y or b.y + b.length <= a.y)

    if overlap_x:
        if a_north_of_b and side_a == Side.BOTTOM and side_b == Side.TOP:
            return True
        if a_south_of_b and side_a == Side.TOP and side_b == Side.BOTTOM:
            return True
    if overlap_y:
        if a_west_of_b and side_a == Side.RIGHT and side_b == Side.LEFT:
            return True
        if a_east_of_b and side_a == Side.LEFT and side_b == Side.RIGHT:
            return True
    return False


def required_spacing(
    a: Bed,
    b: Bed,
    walkway_width: float,
    catalog: Mapping[str, TrellisType] | None = None,
) -> float:
    """Return the minimum gap in feet that must separate the two beds."""

    if beds_are_end_to_end(a, b):
        return 0.0
    if beds_have_facing_connectors(a, b, catalog):
        return CONNECTOR_SPACING
    return float(walkway_width)
