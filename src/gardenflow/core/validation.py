"""Bounds and collision checks for bed placement."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Mapping

from .catalog import TrellisType
from .constants import MAX_TRELLIS_SPAN, ErrorKind
from .garden import Bed
from .geometry import gap, in_bounds, rectangles_overlap
from .spacing import required_spacing
from .trellis import trellis_assignment_errors

OUT_OF_BOUNDS_MESSAGE = "Bed extends outside garden boundaries"
COLLISION_MESSAGE = "Bed overlaps or is too close to another bed"


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    errors: List[str] = field(default_factory=list)
    error_kinds: List[ErrorKind] = field(default_factory=list)


@dataclass(frozen=True)
class LayoutIssue:
    bed_id: str
    bed_name: str
    message: str


@dataclass(frozen=True)
class SpaceUsage:
    garden_area: float
    bed_area: float
    percentage: int
    remaining: float


def has_collision(
    bed: Bed,
    all_beds: Iterable[Bed],
    exclude_id: str | None = None,
    walkway_width: float = 0.0,
    *,
    catalog: Mapping[str, TrellisType] | None = None,
) -> bool:
    """Return True if ``bed`` is too close to any other bed.

    The bed itself and ``exclude_id`` are skipped, so a bed can be checked
    against a list that still contains its previous position.
    """

    for other in all_beds:
        if other.id == exclude_id or other.id == bed.id:
            continue
        padding = required_spacing(bed, other, walkway_width, catalog) / 2
        if rectangles_overlap(bed, other, padding):
            return True
    return False


def validate_position(
    bed: Bed,
    all_beds: Iterable[Bed],
    plot_width: float,
    plot_length: float,
    exclude_id: str | None = None,
    walkway_width: float = 0.0,
    *,
    catalog: Mapping[str, TrellisType] | None = None,
) -> ValidationResult:
    """Check bounds and spacing independently and report every failure."""

    errors: List[str] = []
    kinds: List[ErrorKind] = []
    if not in_bounds(bed, plot_width, plot_length):
        errors.append(OUT_OF_BOUNDS_MESSAGE)
        kinds.append(ErrorKind.OUT_OF_BOUNDS)
    if has_collision(bed, all_beds, exclude_id, walkway_width, catalog=catalog):
        errors.append(COLLISION_MESSAGE)
        kinds.append(ErrorKind.COLLISION)
    return ValidationResult(valid=not errors, errors=errors, error_kinds=kinds)


def summarize_layout(
    beds: List[Bed],
    plot_width: float,
    plot_length: float,
    walkway_width: float = 0.0,
    *,
    catalog: Mapping[str, TrellisType] | None = None,
) -> List[LayoutIssue]:
    """Validate every bed against the rest of the plan, in bed order."""

    issues: List[LayoutIssue] = []
    for bed in beds:
        result = validate_position(bed, beds, plot_width, plot_length, bed.id, walkway_width, catalog=catalog)
        for message in result.errors:
            issues.append(LayoutIssue(bed.id, bed.name, message))
        for message in trellis_assignment_errors(bed.trellis, bed.trellis_side, bed.width, bed.length):
            issues.append(LayoutIssue(bed.id, bed.name, message))
    return issues


def validate_trellis_connector(bed_a: Bed, bed_b: Bed) -> ValidationResult:
    """Check that two beds are close enough to be spanned by one trellis."""

    if gap(bed_a, bed_b) > MAX_TRELLIS_SPAN:
        return ValidationResult(False, ["Beds are too far apart for trellis"])
    return ValidationResult(True)


def calculate_space_usage(beds: Iterable[Bed], plot_width: float, plot_length: float) -> SpaceUsage:
    garden_area = plot_width * plot_length
    bed_area = sum(bed.width * bed.length for bed in beds)
    percentage = int(bed_area / garden_area * 100 + 0.5) if garden_area else 0
    return SpaceUsage(garden_area, bed_area, percentage, garden_area - bed_area)


def can_bed_fit(width: float, length: float, plot_width: float, plot_length: float) -> bool:
    return width <= plot_width and length <= plot_length
