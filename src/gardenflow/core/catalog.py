"""Static catalog tables: bed types, trellis types, structure types, walkway presets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping, Tuple

from .constants import TrellisKind


@dataclass(frozen=True)
class TrellisType:
    """A trellis model; connectors span two beds, attachments sit on one."""

    key: str
    name: str
    kind: TrellisKind
    height_ft: float
    width_ft: float | None = None
    description: str = ""


@dataclass(frozen=True)
class StructureType:
    key: str
    name: str
    default_width: float
    default_length: float
    min_width: float
    min_length: float
    can_hold_plants: bool = False
    description: str = ""


BED_TYPES: Dict[str, str] = {
    "raised": "Raised Bed",
    "inground": "In-Ground",
    "planter": "Planter/Pot",
    "container": "Container",
}

TRELLIS_TYPES: Dict[str, TrellisType] = {
    "aframe": TrellisType(
        "aframe", "A-Frame Trellis", TrellisKind.ATTACHMENT, 6,
        description="Attaches to one side of a bed, good for beans and peas",
    ),
    "arch": TrellisType(
        "arch", "Arch Trellis", TrellisKind.ATTACHMENT, 7,
        description="Curved trellis over bed, great for cucumbers and squash",
    ),
    "vertical": TrellisType(
        "vertical", "Vertical Panel", TrellisKind.ATTACHMENT, 6,
        description="Flat panel attached to bed edge, for tomatoes and climbing plants",
    ),
    "cage": TrellisType(
        "cage", "Tomato Cage", TrellisKind.ATTACHMENT, 4,
        description="Individual plant support, best for tomatoes and peppers",
    ),
    "tunnel": TrellisType(
        "tunnel", "Tunnel Trellis", TrellisKind.CONNECTOR, 7, 4,
        description="Connects two beds, creates walkable tunnel with plants overhead",
    ),
    "arbor": TrellisType(
        "arbor", "Garden Arbor", TrellisKind.CONNECTOR, 8, 4,
        description="Decorative arch connecting beds, for grapes or climbing roses",
    ),
    "cattle_panel": TrellisType(
        "cattle_panel", "Cattle Panel Arch", TrellisKind.CONNECTOR, 6, 4,
        description="Strong curved panel between beds, supports heavy squash",
    ),
}

STRUCTURE_TYPES: Dict[str, StructureType] = {
    "greenhouse": StructureType(
        "greenhouse", "Greenhouse", 8, 10, 4, 6, can_hold_plants=True,
        description="Protect seedlings and overwinter potted plants",
    ),
    "fertilizer": StructureType(
        "fertilizer", "Fertilizer Pile", 3, 3, 2, 2,
        description="Compost and fertilizer storage",
    ),
}

WALKWAY_WIDTHS: Tuple[Tuple[float, str], ...] = (
    (2.0, "2ft (tight)"),
    (2.5, "2.5ft (narrow)"),
    (3.0, "3ft (wheelbarrow)"),
    (3.5, "3.5ft (comfortable)"),
    (4.0, "4ft (cart/wagon)"),
)


def is_connector_trellis(trellis_key: str | None, catalog: Mapping[str, TrellisType] | None = None) -> bool:
    """Return True if the trellis key names a connector-type trellis."""

    if not trellis_key:
        return False
    entry = (catalog if catalog is not None else TRELLIS_TYPES).get(trellis_key)
    return entry is not None and entry.kind == TrellisKind.CONNECTOR
