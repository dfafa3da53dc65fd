"""Structures (greenhouses, fertilizer piles) placed alongside beds.

Structures are only checked against their type's minimum dimensions. They do
not take part in the bed collision and walkway model.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Tuple

from .catalog import STRUCTURE_TYPES, StructureType
from .garden import Structure, generate_id
from .validation import LayoutIssue, ValidationResult


def default_structure_dimensions(
    kind: str, catalog: Mapping[str, StructureType] | None = None
) -> Tuple[float, float]:
    entry = (catalog if catalog is not None else STRUCTURE_TYPES).get(kind)
    if entry is None:
        return 4.0, 4.0
    return entry.default_width, entry.default_length


def validate_structure_dimensions(
    kind: str,
    width: float,
    length: float,
    catalog: Mapping[str, StructureType] | None = None,
) -> ValidationResult:
    entry = (catalog if catalog is not None else STRUCTURE_TYPES).get(kind)
    if entry is None:
        return ValidationResult(False, ["Unknown object type"])
    if width < entry.min_width:
        return ValidationResult(False, [f"Minimum width is {entry.min_width:g}ft"])
    if length < entry.min_length:
        return ValidationResult(False, [f"Minimum length is {entry.min_length:g}ft"])
    return ValidationResult(True)


def create_structure(
    kind: str,
    catalog: Mapping[str, StructureType] | None = None,
    **overrides: Any,
) -> Structure | None:
    """Create a structure of ``kind`` with catalog defaults; None for an unknown kind."""

    entry = (catalog if catalog is not None else STRUCTURE_TYPES).get(kind)
    if entry is None:
        return None
    plants = tuple(overrides.get("plants") or ()) if entry.can_hold_plants else ()
    return Structure(
        id=overrides.get("id") or generate_id(),
        kind=kind,
        name=overrides.get("name") or entry.name,
        x=float(overrides.get("x") or 0.0),
        y=float(overrides.get("y") or 0.0),
        width=float(overrides.get("width") or entry.default_width),
        length=float(overrides.get("length") or entry.default_length),
        plants=plants,
    )


def structure_issues(
    structures: Iterable[Structure],
    catalog: Mapping[str, StructureType] | None = None,
) -> List[LayoutIssue]:
    """Dimension problems for every structure, in input order."""

    issues: List[LayoutIssue] = []
    for structure in structures:
        result = validate_structure_dimensions(structure.kind, structure.width, structure.length, catalog)
        issues.extend(LayoutIssue(structure.id, structure.name, message) for message in result.errors)
    return issues
