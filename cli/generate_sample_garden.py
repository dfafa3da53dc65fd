"""
Generates a sample garden plan for trying out Magic Layout.
- 30 x 40 ft plot, 3 ft walkways, north-facing.
- Two long beds carrying a tunnel and an arch trellis.
- A row of square beds and a pair of planters.
- One greenhouse.
All beds start stacked at the origin so the layout run has something to do.
"""

import json
from pathlib import Path

OUTPUT_DIR = Path("data/samples")
OUTPUT_DIR.mkdir(parents=True, exist_ok=True)


def generate_sample_garden():
    beds = []

    def add_bed(bed_id, name, width, length, bed_type="raised", trellis=None, trellis_side=None):
        beds.append({
            "id": bed_id,
            "name": name,
            "type": bed_type,
            "x": 0,
            "y": 0,
            "width": width,
            "length": length,
            "plants": [],
            "trellis": trellis,
            "trellisSide": trellis_side,
        })

    # Trellised beds
    add_bed("bed_tunnel", "Squash Bed", 4, 8, trellis="tunnel", trellis_side="long2")
    add_bed("bed_arch", "Cucumber Bed", 8, 4, trellis="arch", trellis_side="long1")

    # Square beds
    for i in range(3):
        add_bed(f"bed_sq{i + 1}", f"Herb Bed {i + 1}", 4, 4)

    # Planters
    add_bed("planter_1", "Pepper Planter", 2, 2, bed_type="planter", trellis="cage", trellis_side="side1")
    add_bed("planter_2", "Basil Planter", 2, 2, bed_type="planter")

    objects = [{
        "id": "greenhouse_1",
        "type": "greenhouse",
        "name": "Greenhouse",
        "x": 20,
        "y": 28,
        "width": 8,
        "length": 10,
        "plants": [],
    }]

    data = {
        "gardenWidth": 30,
        "gardenLength": 40,
        "walkwayWidth": 3,
        "orientation": "N",
        "beds": beds,
        "gardenObjects": objects,
        "gardenPlan": ["tomato", "basil", "squash", "cucumber"],
    }

    with open(OUTPUT_DIR / "garden_sample.json", "w") as f:
        json.dump(data, f, indent=2)

    print(f"Generated garden with {len(beds)} beds and {len(objects)} objects.")


if __name__ == "__main__":
    generate_sample_garden()
