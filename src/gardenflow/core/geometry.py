"""Axis-aligned rectangle primitives shared by beds and structures.

Everything here works on any object exposing ``x``, ``y``, ``width`` and
``length`` in plot feet, with ``(x, y)`` the top-left corner and y growing
downwards (canvas convention).
"""

from __future__ import annotations

import math
from typing import Iterator, Protocol

from .constants import GRID_STEP


class Footprint(Protocol):
    x: float
    y: float
    width: float
    length: float


def rectangles_overlap(a: Footprint, b: Footprint, padding: float = 0.0) -> bool:
    """Return True if the padded rectangles share a region of nonzero area.

    ``padding`` grows both rectangles outward on every side, so two rectangles
    collide under padding ``p`` whenever they are closer than ``2 * p``.
    Edges that merely touch never count as overlap.
    """

    a_x1, a_y1 = a.x - padding, a.y - padding
    a_x2, a_y2 = a.x + a.width + padding, a.y + a.length + padding
    b_x1, b_y1 = b.x - padding, b.y - padding
    b_x2, b_y2 = b.x + b.width + padding, b.y + b.length + padding
    return not (a_x2 <= b_x1 or b_x2 <= a_x1 or a_y2 <= b_y1 or b_y2 <= a_y1)


def gap(a: Footprint, b: Footprint) -> float:
    """Shortest distance between the edges of two rectangles (0 if they touch or overlap)."""

    dx = max(0.0, max(a.x, b.x) - min(a.x + a.width, b.x + b.width))
    dy = max(0.0, max(a.y, b.y) - min(a.y + a.length, b.y + b.length))
    return math.hypot(dx, dy)


def in_bounds(rect: Footprint, plot_width: float, plot_length: float) -> bool:
    """Return True if the rectangle lies entirely inside the plot."""

    return (
        rect.x >= 0
        and rect.y >= 0
        and rect.x + rect.width <= plot_width
        and rect.y + rect.length <= plot_length
    )


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def round_to_half(value: float) -> float:
    # Round half up, matching how positions snap on the planning grid.
    return math.floor(value * 2 + 0.5) / 2


def grid_steps(limit: float, step: float = GRID_STEP) -> Iterator[float]:
    """Yield ``0, step, 2*step, ...`` up to and including ``limit``.

    Values are computed by multiplication so long scans do not accumulate
    floating point drift. Nothing is yielded when ``limit`` is negative.
    """

    if limit < 0:
        return
    count = int(math.floor(limit / step + 1e-9))
    for index in range(count + 1):
        yield index * step
