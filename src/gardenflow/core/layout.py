"""Magic Layout: automatic placement of a whole bed set."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Callable, List, Mapping, Tuple

from .catalog import TrellisType, is_connector_trellis
from .constants import CONNECTOR_SPACING, DEFAULT_WALKWAY_WIDTH, AdvisoryKind, Side
from .garden import Bed, Garden, generate_id
from .geometry import in_bounds
from .placement import find_valid_position
from .trellis import opposite_trellis_side, resolve_trellis_side
from .validation import SpaceUsage, calculate_space_usage, has_collision

logger = logging.getLogger(__name__)

NO_PLANTS_MESSAGE = "Add some plants to your garden plan for companion planting suggestions"


@dataclass
class LayoutConfig:
    """Runtime options for a Magic Layout run."""

    walkway_width: float = DEFAULT_WALKWAY_WIDTH
    orientation: str = "N"
    plant_count: int = 0

    @classmethod
    def from_garden(cls, garden: Garden, walkway_width: float | None = None) -> "LayoutConfig":
        return cls(
            walkway_width=garden.plot.walkway_width if walkway_width is None else walkway_width,
            orientation=garden.plot.orientation,
            plant_count=len(garden.plants),
        )


@dataclass(frozen=True)
class Advisory:
    kind: AdvisoryKind
    message: str


@dataclass
class LayoutResult:
    beds: List[Bed]
    advisories: List[Advisory] = field(default_factory=list)
    paired_count: int = 0
    space_usage: SpaceUsage | None = None
    sun_optimized: bool = False


def _partner_position(anchor: Bed, partner: Bed, side: Side) -> Tuple[float, float]:
    """Top-left corner for a partner bed facing ``anchor`` across its trellis side."""

    if side == Side.RIGHT:
        return anchor.x + anchor.width + CONNECTOR_SPACING, anchor.y
    if side == Side.LEFT:
        return anchor.x - partner.width - CONNECTOR_SPACING, anchor.y
    if side == Side.BOTTOM:
        return anchor.x, anchor.y + anchor.length + CONNECTOR_SPACING
    return anchor.x, anchor.y - partner.length - CONNECTOR_SPACING


class _Placer:
    """Tracks the beds placed so far during one layout run."""

    def __init__(
        self,
        plot_width: float,
        plot_length: float,
        walkway_width: float,
        catalog: Mapping[str, TrellisType] | None,
    ) -> None:
        self.plot_width = plot_width
        self.plot_length = plot_length
        self.walkway_width = walkway_width
        self.catalog = catalog
        self.placed: List[Bed] = []

    def fits(self, bed: Bed) -> bool:
        return in_bounds(bed, self.plot_width, self.plot_length) and not has_collision(
            bed, self.placed, None, self.walkway_width, catalog=self.catalog
        )

    def collides(self, bed: Bed) -> bool:
        return has_collision(bed, self.placed, None, self.walkway_width, catalog=self.catalog)

    def relocate(self, bed: Bed) -> Bed:
        position = find_valid_position(
            bed, self.placed, self.plot_width, self.plot_length, self.walkway_width, catalog=self.catalog
        )
        if position is None:
            logger.warning("No free slot for %s (%s); leaving it at (%s, %s)", bed.name, bed.id, bed.x, bed.y)
            return bed
        logger.debug("Moved %s from (%s, %s) to (%s, %s)", bed.id, bed.x, bed.y, position.x, position.y)
        return replace(bed, x=position.x, y=position.y)

    def add(self, bed: Bed) -> None:
        self.placed.append(bed)


def generate_layout(
    plot_width: float,
    plot_length: float,
    beds: List[Bed],
    walkway_width: float = DEFAULT_WALKWAY_WIDTH,
    orientation: str = "N",
    plant_count: int = 0,
    *,
    catalog: Mapping[str, TrellisType] | None = None,
    id_factory: Callable[[], str] = generate_id,
) -> LayoutResult:
    """Arrange every bed in the plot, pairing connector-trellis beds first.

    Each bed carrying a connector trellis gets a synthesized mirror partner
    placed across the trellis at the connector spacing. The remaining beds
    start from a two-column grid guess and fall back to the forward scan when
    that guess collides. A bed for which no slot exists keeps its last
    coordinates; the run never aborts.
    """

    connector_beds: List[Bed] = []
    regular_beds: List[Bed] = []
    for bed in beds:
        if is_connector_trellis(bed.trellis, catalog) and bed.trellis_side:
            connector_beds.append(bed)
        else:
            regular_beds.append(bed)

    placer = _Placer(plot_width, plot_length, walkway_width, catalog)
    connector_ids = {bed.id for bed in connector_beds}
    processed: set[str] = set()
    paired_count = 0

    for bed in connector_beds:
        if bed.id in processed:
            continue

        side = resolve_trellis_side(bed.width, bed.length, bed.trellis_side).side
        partner_x, partner_y = _partner_position(bed, bed, side)

        original = bed
        if not placer.fits(original):
            original = placer.relocate(original)
        placer.add(original)
        processed.add(bed.id)

        partner = replace(
            bed,
            id=id_factory(),
            name=f"{bed.name} (Pair)",
            x=partner_x,
            y=partner_y,
            trellis_side=opposite_trellis_side(bed.trellis_side),
        )
        if not placer.fits(partner):
            final_side = resolve_trellis_side(original.width, original.length, original.trellis_side).side
            partner_x, partner_y = _partner_position(original, partner, final_side)
            partner = replace(partner, x=partner_x, y=partner_y)
            if not placer.fits(partner):
                partner = placer.relocate(partner)
        placer.add(partner)
        paired_count += 1

    for bed in regular_beds:
        count = sum(1 for placed in placer.placed if placed.id not in connector_ids)
        row, col = divmod(count, 2)
        x = min(col * (bed.width + walkway_width), plot_width - bed.width)
        y = min(row * (bed.length + walkway_width), plot_length - bed.length)
        candidate = replace(bed, x=max(0.0, x), y=max(0.0, y))
        if placer.collides(candidate):
            candidate = placer.relocate(candidate)
        placer.add(candidate)

    advisories: List[Advisory] = []
    if plant_count == 0:
        advisories.append(Advisory(AdvisoryKind.INFO, NO_PLANTS_MESSAGE))
    if paired_count > 0:
        advisories.append(
            Advisory(
                AdvisoryKind.INFO,
                f"Created {paired_count} paired bed(s) for connector trellises (tunnel, arbor, cattle panel)",
            )
        )

    return LayoutResult(
        beds=placer.placed,
        advisories=advisories,
        paired_count=paired_count,
        space_usage=calculate_space_usage(placer.placed, plot_width, plot_length),
        sun_optimized=orientation in ("N", "S"),
    )
