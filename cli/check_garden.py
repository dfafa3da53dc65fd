"""Report placement problems in a saved garden plan."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from gardenflow.core.garden import load_garden
from gardenflow.core.graph_analysis import bed_rows, build_bed_graph, connector_pairs
from gardenflow.core.structures import structure_issues
from gardenflow.core.validation import calculate_space_usage, summarize_layout


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check bed spacing, bounds and structure sizes in a garden plan")
    parser.add_argument("garden", type=Path, help="Path to garden plan JSON")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        garden = load_garden(args.garden)
    except (OSError, ValueError, KeyError) as exc:
        print(f"Could not load {args.garden}: {exc}")
        return 2

    plot = garden.plot
    issues = summarize_layout(garden.beds, plot.width, plot.length, plot.walkway_width)
    issues += structure_issues(garden.structures)
    usage = calculate_space_usage(garden.beds, plot.width, plot.length)
    graph = build_bed_graph(garden.beds)

    print(f"Garden {plot.width:g} x {plot.length:g} ft, walkway {plot.walkway_width:g} ft")
    print(f"{len(garden.beds)} beds, {usage.percentage}% of the plot in use")
    for row in bed_rows(graph):
        print("  Row: " + ", ".join(graph.nodes[bed_id]["name"] for bed_id in sorted(row)))
    for a, b in connector_pairs(graph):
        print(f"  Connector pair: {graph.nodes[a]['name']} <-> {graph.nodes[b]['name']}")

    if not issues:
        print("All beds valid")
        return 0
    print(f"{len(issues)} issue(s) found:")
    for issue in issues:
        print(f"  {issue.bed_name}: {issue.message}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
