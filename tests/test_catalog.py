"""Tests for catalog lookups and custom catalogs."""

from __future__ import annotations

from gardenflow.core.catalog import BED_TYPES, TRELLIS_TYPES, WALKWAY_WIDTHS, TrellisType, is_connector_trellis
from gardenflow.core.constants import DEFAULT_WALKWAY_WIDTH, TrellisKind
from gardenflow.core.garden import Bed
from gardenflow.core.spacing import required_spacing


def test_connector_classification() -> None:
    connectors = sorted(key for key in TRELLIS_TYPES if is_connector_trellis(key))
    assert connectors == ["arbor", "cattle_panel", "tunnel"]
    assert not is_connector_trellis("arch")
    assert not is_connector_trellis(None)
    assert not is_connector_trellis("unknown")


def test_presets() -> None:
    assert DEFAULT_WALKWAY_WIDTH in dict(WALKWAY_WIDTHS)
    assert [width for width, _ in WALKWAY_WIDTHS] == sorted(width for width, _ in WALKWAY_WIDTHS)
    assert "raised" in BED_TYPES


def test_custom_catalog_changes_spacing() -> None:
    catalog = {"rope": TrellisType("rope", "Rope Bridge", TrellisKind.CONNECTOR, 6, 4)}
    a = Bed("a", "A", 0, 0, 4, 8, trellis="rope", trellis_side="long2")
    b = Bed("b", "B", 7, 0, 4, 8, trellis="rope", trellis_side="long1")
    assert is_connector_trellis("rope", catalog)
    assert not is_connector_trellis("tunnel", catalog)
    assert required_spacing(a, b, 4) == 4.0
    assert required_spacing(a, b, 4, catalog) == 3.0
