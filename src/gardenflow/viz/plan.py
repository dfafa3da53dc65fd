"""Static plan drawing using Matplotlib."""

from __future__ import annotations

from pathlib import Path
from typing import List, Mapping, Tuple

from matplotlib.figure import Figure
from matplotlib.patches import Rectangle

from gardenflow.core.catalog import TrellisType
from gardenflow.core.constants import Side
from gardenflow.core.garden import Bed, Garden
from gardenflow.core.trellis import resolve_trellis_side
from gardenflow.core.validation import validate_position

VALID_COLOUR = "#8fbc5a"
INVALID_COLOUR = "#e06666"
STRUCTURE_COLOUR = "#b7d7c9"
TRELLIS_COLOUR = "#5b3a1a"


def _trellis_segment(bed: Bed) -> Tuple[Tuple[float, float], Tuple[float, float]]:
    side = resolve_trellis_side(bed.width, bed.length, bed.trellis_side).side
    left, right = bed.x, bed.x + bed.width
    top, bottom = bed.y, bed.y + bed.length
    if side == Side.BOTTOM:
        return (left, right), (bottom, bottom)
    if side == Side.LEFT:
        return (left, left), (top, bottom)
    if side == Side.RIGHT:
        return (right, right), (top, bottom)
    return (left, right), (top, top)


def build_plan_figure(
    garden: Garden,
    beds: List[Bed] | None = None,
    *,
    title: str = "Garden Plan",
    catalog: Mapping[str, TrellisType] | None = None,
) -> Figure:
    """
    Draw the plot, its beds and structures.

    Beds that fail validation are filled red. ``beds`` overrides the garden's
    own beds, e.g. to draw a generated layout.
    """
    plot = garden.plot
    bed_list = garden.beds if beds is None else beds

    scale = 7 / max(plot.width, plot.length)
    fig = Figure(figsize=(plot.width * scale + 1, plot.length * scale + 1), dpi=100)
    ax = fig.add_subplot(111)

    ax.add_patch(Rectangle((0, 0), plot.width, plot.length, fill=False, edgecolor="black", linewidth=1.5))

    for structure in garden.structures:
        ax.add_patch(
            Rectangle(
                (structure.x, structure.y), structure.width, structure.length,
                facecolor=STRUCTURE_COLOUR, edgecolor="grey", hatch="//",
            )
        )
        ax.text(structure.x + structure.width / 2, structure.y + structure.length / 2, structure.name,
                ha="center", va="center", fontsize=7)

    for bed in bed_list:
        result = validate_position(bed, bed_list, plot.width, plot.length, bed.id, plot.walkway_width, catalog=catalog)
        ax.add_patch(
            Rectangle(
                (bed.x, bed.y), bed.width, bed.length,
                facecolor=VALID_COLOUR if result.valid else INVALID_COLOUR, edgecolor="#4a3b20",
            )
        )
        if bed.trellis and bed.trellis_side:
            xs, ys = _trellis_segment(bed)
            ax.plot(xs, ys, color=TRELLIS_COLOUR, linewidth=4, solid_capstyle="butt")
        ax.text(bed.x + bed.width / 2, bed.y + bed.length / 2, bed.name, ha="center", va="center", fontsize=8)

    ax.set_xlim(-1, plot.width + 1)
    # Plot coordinates grow downwards, like the planner canvas.
    ax.set_ylim(plot.length + 1, -1)
    ax.set_aspect("equal")
    ax.set_xlabel("feet")
    ax.set_title(title)
    fig.tight_layout()
    return fig


def save_plan_image(garden: Garden, output_path: Path, beds: List[Bed] | None = None) -> None:
    """Render the plan and save it to an image file."""
    fig = build_plan_figure(garden, beds)
    fig.savefig(output_path)
