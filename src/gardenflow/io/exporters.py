"""Plan export helpers."""

from __future__ import annotations

import csv
import io
import json
from pathlib import Path
from typing import Any, Dict, Iterable, List
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Image, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from gardenflow.core.catalog import BED_TYPES, WALKWAY_WIDTHS
from gardenflow.core.garden import Bed, Garden, garden_to_dict
from gardenflow.core.graph_analysis import bed_rows, build_bed_graph, connector_pairs
from gardenflow.core.layout import LayoutResult
from gardenflow.core.structures import structure_issues
from gardenflow.core.trellis import resolve_trellis_side
from gardenflow.core.validation import calculate_space_usage, summarize_layout
from gardenflow.viz.plan import build_plan_figure


def export_csv(path: Path, rows: Iterable[dict]) -> None:
    """Write rows of plan data to CSV."""

    rows = list(rows)
    if not rows:
        path.write_text("", encoding="utf-8")
        return
    header = list(rows[0].keys())
    with path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=header)
        writer.writeheader()
        writer.writerows(rows)


def bed_rows_for_export(beds: Iterable[Bed]) -> List[Dict[str, Any]]:
    """Flatten beds into CSV rows, including the resolved trellis side."""

    rows = []
    for bed in beds:
        resolved = ""
        if bed.trellis and bed.trellis_side:
            resolved = resolve_trellis_side(bed.width, bed.length, bed.trellis_side).side.value
        rows.append(
            {
                "id": bed.id,
                "name": bed.name,
                "type": bed.bed_type,
                "x": bed.x,
                "y": bed.y,
                "width": bed.width,
                "length": bed.length,
                "trellis": bed.trellis or "",
                "trellis_side": bed.trellis_side or "",
                "trellis_position": resolved,
            }
        )
    return rows


def export_garden_json(path: Path, garden: Garden) -> None:
    path.write_text(json.dumps(garden_to_dict(garden), indent=2), encoding="utf-8")


def _fig_to_image(fig: Any, width: int = 400, height: int = 400) -> Image:
    """Convert a Matplotlib figure to a ReportLab Image."""
    buf = io.BytesIO()
    fig.savefig(buf, format='png', dpi=100)
    buf.seek(0)
    return Image(buf, width=width, height=height)


def _table(data: List[List[str]], header_colour: Any) -> Table:
    table = Table(data, colWidths=[200, 200])
    table.setStyle(TableStyle([
        ('BACKGROUND', (0, 0), (-1, 0), header_colour),
        ('TEXTCOLOR', (0, 0), (-1, 0), colors.whitesmoke),
        ('ALIGN', (0, 0), (-1, -1), 'LEFT'),
        ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
        ('BOTTOMPADDING', (0, 0), (-1, 0), 8),
        ('GRID', (0, 0), (-1, -1), 1, colors.black)
    ]))
    return table


def export_pdf(path: Path, garden: Garden, result: LayoutResult | None = None) -> None:
    """Generate a PDF report of the garden, or of a generated layout when given."""

    beds = result.beds if result is not None else garden.beds
    plot = garden.plot

    doc = SimpleDocTemplate(str(path), pagesize=letter)
    styles = getSampleStyleSheet()
    story = []

    story.append(Paragraph("Garden Layout Report", styles['Title']))
    story.append(Spacer(1, 12))

    story.append(Paragraph("Plot", styles['Heading2']))
    story.append(_table([
        ["Parameter", "Value"],
        ["Size", f"{plot.width:g} × {plot.length:g} ft"],
        ["Walkway width", dict(WALKWAY_WIDTHS).get(plot.walkway_width, f"{plot.walkway_width:g}ft")],
        ["Orientation", plot.orientation],
        ["Beds", str(len(beds))],
        ["Structures", str(len(garden.structures))],
    ], colors.grey))
    story.append(Spacer(1, 16))

    usage = result.space_usage if result is not None and result.space_usage else calculate_space_usage(
        beds, plot.width, plot.length
    )
    graph = build_bed_graph(beds)
    story.append(Paragraph("Space Usage", styles['Heading2']))
    story.append(_table([
        ["Metric", "Value"],
        ["Garden area", f"{usage.garden_area:g} sq ft"],
        ["Bed area", f"{usage.bed_area:g} sq ft"],
        ["Used", f"{usage.percentage}%"],
        ["Remaining", f"{usage.remaining:g} sq ft"],
        ["End-to-end rows", str(len(bed_rows(graph)))],
        ["Connector pairs", str(len(connector_pairs(graph)))],
    ], colors.darkgreen))
    story.append(Spacer(1, 16))

    if result is not None and result.advisories:
        story.append(Paragraph("Suggestions", styles['Heading2']))
        for advisory in result.advisories:
            story.append(Paragraph(escape(advisory.message), styles['Normal']))
        story.append(Spacer(1, 12))

    story.append(Paragraph("Beds", styles['Heading2']))
    bed_table = Table(
        [["Name", "Type", "Size (ft)", "Position", "Trellis"]]
        + [
            [
                bed.name,
                BED_TYPES.get(bed.bed_type, bed.bed_type),
                f"{bed.width:g} × {bed.length:g}",
                f"({bed.x:g}, {bed.y:g})",
                f"{bed.trellis} ({bed.trellis_side})" if bed.trellis else "-",
            ]
            for bed in beds
        ]
    )
    bed_table.setStyle(TableStyle([
        ('BACKGROUND', (0, 0), (-1, 0), colors.grey),
        ('TEXTCOLOR', (0, 0), (-1, 0), colors.whitesmoke),
        ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
        ('FONTSIZE', (0, 0), (-1, -1), 8),
        ('GRID', (0, 0), (-1, -1), 0.5, colors.black)
    ]))
    story.append(bed_table)
    story.append(Spacer(1, 16))

    story.append(Paragraph("Issues", styles['Heading2']))
    issues = summarize_layout(beds, plot.width, plot.length, plot.walkway_width)
    issues += structure_issues(garden.structures)
    if issues:
        for issue in issues:
            story.append(Paragraph(f"<b>{escape(issue.bed_name)}:</b> {escape(issue.message)}", styles['Normal']))
    else:
        story.append(Paragraph("All beds valid", styles['Normal']))
    story.append(Spacer(1, 16))

    story.append(Paragraph("Plan", styles['Heading2']))
    fig = build_plan_figure(garden, beds)
    fig_width, fig_height = fig.get_size_inches()
    scale = 420 / max(fig_width, fig_height)
    story.append(_fig_to_image(fig, width=int(fig_width * scale), height=int(fig_height * scale)))

    doc.build(story)
