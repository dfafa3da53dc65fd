"""Position search for new, moved, rotated and resized beds."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import Iterable, List, Mapping, NamedTuple

from .catalog import TrellisType
from .constants import (
    DEFAULT_WALKWAY_WIDTH,
    GRID_STEP,
    MAX_BED_DIMENSION,
    MIN_BED_DIMENSION,
    SNAP_ANGLE_STEP_DEG,
    SNAP_SEARCH_RADIUS,
    ErrorKind,
)
from .garden import Bed
from .geometry import clamp, grid_steps, in_bounds, round_to_half
from .validation import can_bed_fit, has_collision, validate_position

logger = logging.getLogger(__name__)


class Position(NamedTuple):
    x: float
    y: float


class SnapResult(NamedTuple):
    x: float
    y: float
    valid: bool


@dataclass(frozen=True)
class PlacementOutcome:
    """Result of adding a bed: the placed bed, or why it could not be placed."""

    bed: Bed | None
    error_kind: ErrorKind | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.bed is not None


def find_valid_position(
    new_bed: Bed,
    existing_beds: Iterable[Bed],
    plot_width: float,
    plot_length: float,
    walkway_width: float = DEFAULT_WALKWAY_WIDTH,
    *,
    catalog: Mapping[str, TrellisType] | None = None,
) -> Position | None:
    """Return the first free top-left corner on the 0.5 ft grid, scanning row by row.

    A second pass ignores the walkway so beds may touch when no slot with a
    full walkway exists. Returns None when neither pass finds a slot.
    """

    beds: List[Bed] = list(existing_beds)
    ys = list(grid_steps(plot_length - new_bed.length))
    xs = list(grid_steps(plot_width - new_bed.width))

    for y in ys:
        for x in xs:
            candidate = replace(new_bed, x=x, y=y)
            if in_bounds(candidate, plot_width, plot_length) and not has_collision(
                candidate, beds, None, walkway_width, catalog=catalog
            ):
                return Position(x, y)

    for y in ys:
        for x in xs:
            candidate = replace(new_bed, x=x, y=y)
            if validate_position(candidate, beds, plot_width, plot_length, catalog=catalog).valid:
                logger.debug("Placed %s without walkway at (%s, %s)", new_bed.id, x, y)
                return Position(x, y)

    return None


def snap_to_valid_position(
    bed: Bed,
    all_beds: Iterable[Bed],
    plot_width: float,
    plot_length: float,
    walkway_width: float = 0.0,
    *,
    catalog: Mapping[str, TrellisType] | None = None,
) -> SnapResult:
    """Pull a dragged bed onto the grid, searching outward if it landed somewhere invalid.

    ``bed`` carries the dragged coordinates. The search probes rings of
    0.5 ft steps up to 3 ft at 45 degree intervals. If nothing nearby is valid
    the bed's own coordinates come back with ``valid=False`` and the caller
    should revert the move.
    """

    beds = list(all_beds)
    x = round_to_half(clamp(bed.x, 0.0, plot_width - bed.width))
    y = round_to_half(clamp(bed.y, 0.0, plot_length - bed.length))

    def is_valid(px: float, py: float) -> bool:
        candidate = replace(bed, x=px, y=py)
        return validate_position(candidate, beds, plot_width, plot_length, bed.id, walkway_width, catalog=catalog).valid

    if is_valid(x, y):
        return SnapResult(x, y, True)

    rings = int(round(SNAP_SEARCH_RADIUS / GRID_STEP))
    for ring in range(1, rings + 1):
        radius = ring * GRID_STEP
        for angle in range(0, 360, SNAP_ANGLE_STEP_DEG):
            theta = math.radians(angle)
            test_x = round_to_half(x + radius * math.cos(theta))
            test_y = round_to_half(y + radius * math.sin(theta))
            if is_valid(test_x, test_y):
                return SnapResult(test_x, test_y, True)

    return SnapResult(bed.x, bed.y, False)


def place_new_bed(
    bed: Bed,
    existing_beds: Iterable[Bed],
    plot_width: float,
    plot_length: float,
    walkway_width: float = DEFAULT_WALKWAY_WIDTH,
    *,
    catalog: Mapping[str, TrellisType] | None = None,
) -> PlacementOutcome:
    """Size-check a new bed and put it in the first free slot."""

    width = clamp(bed.width, MIN_BED_DIMENSION, MAX_BED_DIMENSION)
    length = clamp(bed.length, MIN_BED_DIMENSION, MAX_BED_DIMENSION)
    candidate = replace(
        bed,
        width=width,
        length=length,
        trellis_side=bed.trellis_side if bed.trellis else None,
    )

    if not can_bed_fit(width, length, plot_width, plot_length):
        message = f"Bed {width:g}×{length:g}ft is larger than garden"
        logger.info("Rejected %s: %s", bed.id, message)
        return PlacementOutcome(None, ErrorKind.DIMENSION_TOO_LARGE, message)

    position = find_valid_position(candidate, existing_beds, plot_width, plot_length, walkway_width, catalog=catalog)
    if position is None:
        message = f"No space for {width:g}×{length:g}ft bed"
        logger.info("Rejected %s: %s", bed.id, message)
        return PlacementOutcome(None, ErrorKind.NO_SPACE_FOUND, message)

    return PlacementOutcome(replace(candidate, x=position.x, y=position.y))


def rotate_bed(bed: Bed, plot_width: float, plot_length: float) -> Bed:
    """Swap width and length, shifting the bed back inside the plot if needed."""

    rotated = replace(bed, width=bed.length, length=bed.width)
    x, y = rotated.x, rotated.y
    if x + rotated.width > plot_width:
        x = max(0.0, plot_width - rotated.width)
    if y + rotated.length > plot_length:
        y = max(0.0, plot_length - rotated.length)
    return replace(rotated, x=x, y=y)


def resize_bed(
    bed: Bed,
    width: float,
    length: float,
    all_beds: Iterable[Bed],
    plot_width: float,
    plot_length: float,
    walkway_width: float = 0.0,
    *,
    catalog: Mapping[str, TrellisType] | None = None,
) -> tuple[Bed, bool]:
    """Apply new dimensions, or keep the old ones if the resized bed would be invalid."""

    resized = replace(bed, width=width, length=length)
    result = validate_position(resized, all_beds, plot_width, plot_length, bed.id, walkway_width, catalog=catalog)
    if not result.valid:
        return bed, False
    return resized, True
