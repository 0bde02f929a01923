"""Application commands (use cases) for garden costing."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from garden_planner.domain import GardenPlanner, Rectangle

from .config import PlannerConfiguration, read_design_file
from .dtos import GardenReport

logger = logging.getLogger(__name__)

# Two rectangles with a square in the middle.
DEFAULT_LAYOUT: tuple[Rectangle, ...] = (
    Rectangle(2.0, 1.0),
    Rectangle(2.0, 2.0),
    Rectangle(2.0, 1.0),
)


class PlanGardenCommand:
    """Command to cost a single garden design.

    Each call builds a fresh planner, loads the beds, recalculates the
    totals once and returns a report.
    """

    def __init__(self, default_layout: Iterable[Rectangle] = DEFAULT_LAYOUT) -> None:
        self.default_layout = tuple(default_layout)

    def execute(
        self,
        soil_price: float,
        wall_price: float,
        design_lines: Iterable[str] | None = None,
    ) -> GardenReport:
        """Cost a garden design.

        Args:
            soil_price: Price of soil per cubic metre.
            wall_price: Price of wall material per metre.
            design_lines: Design file lines to load beds from. When None the
                default layout is used.

        Returns:
            GardenReport with the beds, totals and costs.

        Raises:
            DesignParseError: If a design line is not a valid bed statement.
        """
        planner = GardenPlanner(soil_price, wall_price)
        if design_lines is None:
            logger.debug("No design given, using default layout")
            planner.add_beds(self.default_layout)
        else:
            planner.read_beds(design_lines)

        planner.recalculate_totals()
        return GardenReport.from_planner(planner)

    def execute_config(self, config: PlannerConfiguration) -> GardenReport:
        """Cost the garden described by a configuration.

        Raises:
            ConfigError: If the configured design file cannot be read.
            DesignParseError: If the design file contains a bad line.
        """
        design_lines = None
        if config.design_file is not None:
            design_lines = read_design_file(config.design_file)

        return self.execute(
            config.prices.soil_per_cubic_metre,
            config.prices.wall_per_metre,
            design_lines,
        )
