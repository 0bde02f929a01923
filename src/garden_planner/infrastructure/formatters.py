"""Output formatters for garden reports."""

from __future__ import annotations

from garden_planner.application.dtos import GardenReport


class GardenReportFormatter:
    """Formats a garden report for the console.

    Example output::

        Garden Planner v0.2
        Garden design is:
            Rectangle 2.0 1.0
        Total garden area is:     2.00 m2.
        Total wall length is:     6.00 m.
        Total soil required:      0.40 m3.
        Total garden cost is: $ 134.40.
    """

    def __init__(self, indent: str = "    ") -> None:
        self._indent = indent

    def format(self, report: GardenReport) -> str:
        lines = [report.version, "Garden design is:"]
        lines.extend(f"{self._indent}{bed}" for bed in report.beds)
        lines.append(f"Total garden area is: {report.total_garden_area:8.2f} m2.")
        lines.append(f"Total wall length is: {report.total_wall_length:8.2f} m.")
        lines.append(f"Total soil required:  {report.soil_volume:8.2f} m3.")
        lines.append(f"Total garden cost is: ${report.total_cost:7.2f}.")
        return "\n".join(lines)
