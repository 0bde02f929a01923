"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from garden_planner.domain import GARDEN_PLANNER_VERSION, GardenPlanner, Rectangle


@dataclass
class GardenReport:
    """Materials and cost summary for one garden design.

    Attributes:
        beds: Beds in the design, in input order.
        soil_price: Price of soil per cubic metre.
        wall_price: Price of wall material per metre.
        total_garden_area: Total bed area in square metres.
        total_wall_length: Total wall length in metres.
        soil_volume: Soil needed in cubic metres.
        wall_cost: Cost of the walls.
        soil_cost: Cost of the soil.
        total_cost: Walls plus soil.
        version: Planner version banner.
    """

    beds: list[Rectangle]
    soil_price: float
    wall_price: float
    total_garden_area: float
    total_wall_length: float
    soil_volume: float
    wall_cost: float
    soil_cost: float
    total_cost: float
    version: str = field(default=GARDEN_PLANNER_VERSION)

    @classmethod
    def from_planner(cls, planner: GardenPlanner) -> GardenReport:
        """Snapshot a planner's beds, totals and costs."""
        return cls(
            beds=list(planner.beds),
            soil_price=planner.soil_price,
            wall_price=planner.wall_price,
            total_garden_area=planner.total_garden_area,
            total_wall_length=planner.total_wall_length,
            soil_volume=planner.soil_volume,
            wall_cost=planner.wall_cost,
            soil_cost=planner.soil_cost,
            total_cost=planner.total_cost,
        )
