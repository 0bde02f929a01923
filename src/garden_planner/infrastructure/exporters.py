"""Machine-readable exporters for garden reports."""

from __future__ import annotations

import json

from garden_planner.application.dtos import GardenReport


class JsonExporter:
    """Exports a garden report as JSON."""

    def export(self, report: GardenReport) -> str:
        """Export a garden report as an indented JSON string."""
        data = {
            "version": report.version,
            "prices": {
                "soil_per_cubic_metre": report.soil_price,
                "wall_per_metre": report.wall_price,
            },
            "beds": [
                {
                    "shape": bed.shape.value,
                    "width": bed.width,
                    "height": bed.height,
                    "area": bed.area,
                    "perimeter": bed.perimeter,
                }
                for bed in report.beds
            ],
            "totals": {
                "garden_area_m2": report.total_garden_area,
                "wall_length_m": report.total_wall_length,
                "soil_volume_m3": report.soil_volume,
                "wall_cost": report.wall_cost,
                "soil_cost": report.soil_cost,
                "total_cost": report.total_cost,
            },
        }
        return json.dumps(data, indent=2)
