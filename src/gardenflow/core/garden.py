"""Garden plan records plus JSON loading and validation."""

from __future__ import annotations

import json
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Tuple

from .constants import DEFAULT_WALKWAY_WIDTH, MAX_PLOT_DIMENSION, MIN_PLOT_DIMENSION


@dataclass(frozen=True)
class Bed:
    """A rectangular planting area placed in the plot (feet, top-left origin)."""

    id: str
    name: str
    x: float
    y: float
    width: float
    length: float
    bed_type: str = "raised"
    plants: Tuple[Any, ...] = ()
    trellis: str | None = None
    trellis_side: str | None = None


@dataclass(frozen=True)
class Structure:
    """A non-bed footprint such as a greenhouse."""

    id: str
    kind: str
    name: str
    x: float
    y: float
    width: float
    length: float
    plants: Tuple[Any, ...] = ()


@dataclass(frozen=True)
class GardenPlot:
    width: float
    length: float
    walkway_width: float = DEFAULT_WALKWAY_WIDTH
    orientation: str = "N"


@dataclass
class Garden:
    """Container for the plot and everything placed in it."""

    plot: GardenPlot
    beds: List[Bed] = field(default_factory=list)
    structures: List[Structure] = field(default_factory=list)
    plants: List[str] = field(default_factory=list)

    def bed_ids(self) -> List[str]:
        return [bed.id for bed in self.beds]

    def find_bed(self, bed_id: str) -> Bed | None:
        return next((bed for bed in self.beds if bed.id == bed_id), None)


def generate_id() -> str:
    """Return a short random id for a new record."""

    return uuid.uuid4().hex[:9]


def bed_from_record(item: Mapping[str, Any]) -> Bed:
    """Build a Bed from a camelCase JSON record.

    A trellis side without a trellis is dropped, since the pair must be set together.
    """

    trellis = item.get("trellis") or None
    return Bed(
        id=str(item["id"]),
        name=item.get("name") or str(item["id"]),
        x=float(item.get("x", 0.0)),
        y=float(item.get("y", 0.0)),
        width=float(item["width"]),
        length=float(item["length"]),
        bed_type=item.get("type", "raised"),
        plants=tuple(item.get("plants") or ()),
        trellis=trellis,
        trellis_side=(item.get("trellisSide") or None) if trellis else None,
    )


def bed_to_record(bed: Bed) -> Dict[str, Any]:
    return {
        "id": bed.id,
        "name": bed.name,
        "type": bed.bed_type,
        "x": bed.x,
        "y": bed.y,
        "width": bed.width,
        "length": bed.length,
        "plants": list(bed.plants),
        "trellis": bed.trellis,
        "trellisSide": bed.trellis_side,
    }


def structure_from_record(item: Mapping[str, Any]) -> Structure:
    return Structure(
        id=str(item["id"]),
        kind=item.get("type", "greenhouse"),
        name=item.get("name") or str(item["id"]),
        x=float(item.get("x", 0.0)),
        y=float(item.get("y", 0.0)),
        width=float(item["width"]),
        length=float(item["length"]),
        plants=tuple(item.get("plants") or ()),
    )


def structure_to_record(structure: Structure) -> Dict[str, Any]:
    return {
        "id": structure.id,
        "type": structure.kind,
        "name": structure.name,
        "x": structure.x,
        "y": structure.y,
        "width": structure.width,
        "length": structure.length,
        "plants": list(structure.plants),
    }


def garden_from_dict(data: Mapping[str, Any]) -> Garden:
    plot = GardenPlot(
        width=float(data["gardenWidth"]),
        length=float(data["gardenLength"]),
        walkway_width=float(data.get("walkwayWidth", DEFAULT_WALKWAY_WIDTH)),
        orientation=data.get("orientation", "N"),
    )
    garden = Garden(
        plot=plot,
        beds=[bed_from_record(item) for item in data.get("beds", [])],
        structures=[structure_from_record(item) for item in data.get("gardenObjects", [])],
        plants=[str(p) for p in data.get("gardenPlan", [])],
    )
    validate_garden(garden)
    return garden


def garden_to_dict(garden: Garden) -> Dict[str, Any]:
    return {
        "gardenWidth": garden.plot.width,
        "gardenLength": garden.plot.length,
        "walkwayWidth": garden.plot.walkway_width,
        "orientation": garden.plot.orientation,
        "beds": [bed_to_record(bed) for bed in garden.beds],
        "gardenObjects": [structure_to_record(s) for s in garden.structures],
        "gardenPlan": list(garden.plants),
    }


def load_garden(path: Path) -> Garden:
    """Load a garden JSON file and return a validated Garden.

    Accepts either the bare plan object or the versioned wrapper written by
    the planner front end (``{"version": ..., "data": {...}}``).
    """

    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if "data" in data and "gardenWidth" not in data:
        data = data["data"]
    return garden_from_dict(data)


def validate_garden(garden: Garden) -> None:
    """Validate the structural integrity of a garden plan.

    Placement problems (overlaps, out-of-bounds beds) are not errors here; they
    are reported by the validator. Only records the engine cannot work with
    are rejected.
    """

    plot = garden.plot
    for label, value in (("width", plot.width), ("length", plot.length)):
        if not MIN_PLOT_DIMENSION <= value <= MAX_PLOT_DIMENSION:
            raise ValueError(
                f"Garden {label} must be between {MIN_PLOT_DIMENSION:g} and {MAX_PLOT_DIMENSION:g} ft, got {value:g}"
            )
    if plot.walkway_width < 0:
        raise ValueError("Walkway width cannot be negative")

    seen = set()
    for record in [*garden.beds, *garden.structures]:
        if not record.id:
            raise ValueError(f"Record '{record.name}' has an empty id")
        if record.id in seen:
            raise ValueError(f"Duplicate id detected in garden: {record.id}")
        seen.add(record.id)
        if record.width <= 0 or record.length <= 0:
            raise ValueError(f"{record.name} must have positive width and length")
