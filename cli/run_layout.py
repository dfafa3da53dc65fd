"""Command-line entry point for headless Magic Layout runs."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Arrange the beds of a garden plan automatically")
    parser.add_argument("garden", type=Path, help="Path to garden plan JSON")
    parser.add_argument("--walkway", type=float, help="Walkway width in feet (defaults to the plan's setting)")
    parser.add_argument("--settings", type=Path, help="Magic Layout settings JSON (walkwayWidth, orientation)")
    parser.add_argument(
        "--output",
        type=Path,
        help="Directory to write outputs (layout.json, beds.csv, plan.png, report.pdf)",
        default=Path("outputs"),
    )
    parser.add_argument("--pdf", action="store_true", help="Also write a PDF report")
    parser.add_argument("--verbose", action="store_true", help="Log every bed relocation")
    return parser.parse_args()


def main() -> None:
    """Parse arguments and dispatch to the layout generator."""

    import sys
    from dataclasses import replace
    from importlib import import_module

    project_root = Path(__file__).resolve().parents[1]
    sys.path.append(str(project_root / "src"))

    layout_module = import_module("gardenflow.core.layout")
    LayoutConfig = layout_module.LayoutConfig
    generate_layout = layout_module.generate_layout
    graph_module = import_module("gardenflow.core.graph_analysis")
    exporters = import_module("gardenflow.io.exporters")
    load_garden = import_module("gardenflow.core.garden").load_garden
    load_layout_settings = import_module("gardenflow.io.importers").load_layout_settings
    save_plan_image = import_module("gardenflow.viz.plan").save_plan_image

    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.walkway is not None and args.walkway < 0:
        raise SystemExit("--walkway cannot be negative")

    garden = load_garden(args.garden)
    config = LayoutConfig.from_garden(garden, args.walkway)
    if args.settings is not None:
        settings = load_layout_settings(args.settings)
        if args.walkway is None:
            config.walkway_width = float(settings["walkwayWidth"])
        config.orientation = settings.get("orientation", config.orientation)

    result = generate_layout(
        garden.plot.width,
        garden.plot.length,
        garden.beds,
        walkway_width=config.walkway_width,
        orientation=config.orientation,
        plant_count=config.plant_count,
    )

    output_dir = args.output
    output_dir.mkdir(parents=True, exist_ok=True)

    garden.plot = replace(garden.plot, walkway_width=config.walkway_width, orientation=config.orientation)
    garden.beds = result.beds
    exporters.export_garden_json(output_dir / "layout.json", garden)
    exporters.export_csv(output_dir / "beds.csv", exporters.bed_rows_for_export(result.beds))
    save_plan_image(garden, output_dir / "plan.png")
    if args.pdf:
        exporters.export_pdf(output_dir / "report.pdf", garden, result)

    graph = graph_module.build_bed_graph(result.beds)
    for advisory in result.advisories:
        print(f"[{advisory.kind.value}] {advisory.message}")
    usage = result.space_usage
    print(
        f"Placed {len(result.beds)} beds ({result.paired_count} paired, "
        f"{len(graph_module.bed_rows(graph))} end-to-end rows), "
        f"{usage.percentage}% of the plot in use. Results saved to {output_dir}"
    )


if __name__ == "__main__":
    main()
