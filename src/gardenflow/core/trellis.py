"""Trellis side labels and their resolution to plot-relative sides.

Bed records store the trellis side relative to the bed's own shape
(``long1``/``short2`` for rectangles, ``side1``..``side4`` for squares), so the
label survives a rotation. Turning it into top/bottom/left/right needs the
bed's current dimensions. Each shape class has its own lookup table; legacy
compass labels are accepted everywhere.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from .constants import EDGE_TOLERANCE, Side


@dataclass(frozen=True)
class ResolvedSide:
    side: Side
    is_long_side: bool


RECTANGLE_LABELS: Tuple[str, ...] = ("long1", "long2", "short1", "short2")
SQUARE_LABELS: Tuple[str, ...] = ("side1", "side2", "side3", "side4")
COMPASS_LABELS: Tuple[str, ...] = ("N", "S", "E", "W")

# Squares number their sides clockwise from the top; rectangle labels found on
# a square bed (data saved before the bed was resized) reuse the same order.
_SQUARE_TABLE: Dict[str, Side] = {
    "side1": Side.TOP,
    "long1": Side.TOP,
    "side2": Side.RIGHT,
    "short1": Side.RIGHT,
    "side3": Side.BOTTOM,
    "long2": Side.BOTTOM,
    "side4": Side.LEFT,
    "short2": Side.LEFT,
}

_WIDE_TABLE: Dict[str, ResolvedSide] = {
    "long1": ResolvedSide(Side.TOP, True),
    "long2": ResolvedSide(Side.BOTTOM, True),
    "short1": ResolvedSide(Side.LEFT, False),
    "short2": ResolvedSide(Side.RIGHT, False),
}

_TALL_TABLE: Dict[str, ResolvedSide] = {
    "long1": ResolvedSide(Side.LEFT, True),
    "long2": ResolvedSide(Side.RIGHT, True),
    "short1": ResolvedSide(Side.TOP, False),
    "short2": ResolvedSide(Side.BOTTOM, False),
}

_COMPASS_TABLE: Dict[str, Side] = {
    "N": Side.TOP,
    "S": Side.BOTTOM,
    "E": Side.RIGHT,
    "W": Side.LEFT,
}

_OPPOSITES: Dict[str, str] = {
    "long1": "long2",
    "long2": "long1",
    "short1": "short2",
    "short2": "short1",
    "side1": "side3",
    "side3": "side1",
    "side2": "side4",
    "side4": "side2",
    "N": "S",
    "S": "N",
    "E": "W",
    "W": "E",
}


def is_square(width: float, length: float) -> bool:
    return abs(width - length) < EDGE_TOLERANCE


def resolve_trellis_side(width: float, length: float, label: str | None) -> ResolvedSide:
    """Map a shape-relative trellis label to the concrete side of the bed.

    Unknown or missing labels resolve to the top side rather than failing.
    """

    if is_square(width, length):
        if label in _COMPASS_TABLE:
            return ResolvedSide(_COMPASS_TABLE[label], True)
        return ResolvedSide(_SQUARE_TABLE.get(label or "", Side.TOP), True)

    if label in _COMPASS_TABLE:
        side = _COMPASS_TABLE[label]
        if side in (Side.TOP, Side.BOTTOM):
            return ResolvedSide(side, width >= length)
        return ResolvedSide(side, length >= width)

    table = _WIDE_TABLE if width > length else _TALL_TABLE
    return table.get(label or "", ResolvedSide(Side.TOP, True))


def opposite_trellis_side(label: str | None) -> str:
    """Return the label on the other side of the bed (``long1`` when unknown)."""

    return _OPPOSITES.get(label or "", "long1")


def trellis_sides_for_bed(width: float, length: float) -> List[Tuple[str, str]]:
    """Valid ``(label, display name)`` choices for a bed of the given shape."""

    if is_square(width, length):
        names = ("Side 1 (Top)", "Side 2 (Right)", "Side 3 (Bottom)", "Side 4 (Left)")
        return list(zip(SQUARE_LABELS, names))
    names = ("Long Side 1", "Long Side 2", "Short Side 1", "Short Side 2")
    return list(zip(RECTANGLE_LABELS, names))


def trellis_assignment_errors(trellis: str | None, trellis_side: str | None, width: float, length: float) -> List[str]:
    """Describe problems with a bed's trellis fields without rejecting the bed."""

    errors: List[str] = []
    if not trellis:
        if trellis_side:
            errors.append("Trellis side is set but the bed has no trellis")
        return errors
    if not trellis_side:
        errors.append("Trellis has no side assigned")
        return errors
    valid_labels = [label for label, _ in trellis_sides_for_bed(width, length)]
    if trellis_side not in valid_labels and trellis_side not in COMPASS_LABELS:
        errors.append(f"Trellis side '{trellis_side}' does not match the bed shape")
    return errors
