"""Input configuration loaders."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict


def load_json(path: Path) -> Dict[str, Any]:
    """Read a JSON file into a Python dictionary."""

    return json.loads(Path(path).read_text(encoding="utf-8"))


def load_layout_settings(path: Path) -> Dict[str, Any]:
    """Load Magic Layout settings (walkway width, orientation)."""

    data = load_json(path)
    if "walkwayWidth" not in data:
        raise ValueError("Settings file missing keys: walkwayWidth")
    walkway = data["walkwayWidth"]
    if not isinstance(walkway, (int, float)) or walkway < 0:
        raise ValueError(f"walkwayWidth must be a non-negative number, got {walkway!r}")
    return data
