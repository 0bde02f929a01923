"""Garden planner: costs a layout of garden beds.

The planner totals the wall length needed to edge every bed and the soil
needed to fill them, then prices both.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from .design_format import parse_beds
from .value_objects import Rectangle

logger = logging.getLogger(__name__)

GARDEN_PLANNER_VERSION = "Garden Planner v0.2"
SOIL_DEPTH = 0.2  # metres


class GardenPlanner:
    """Costs a garden made up of rectangular beds.

    Beds can be added and removed freely. Every change marks the totals
    as stale, and they are recalculated the next time a total or cost is
    read. ``recalculate_totals`` may also be called directly.
    """

    def __init__(self, soil_price: float, wall_price: float) -> None:
        """Create a planner with the given unit prices.

        Args:
            soil_price: Price of garden soil per cubic metre.
            wall_price: Price of bed wall material per metre.
        """
        self._soil_price = soil_price
        self._wall_price = wall_price
        self._beds: list[Rectangle] = []
        self._total_wall_length = 0.0
        self._total_garden_area = 0.0
        self._dirty = False

    @property
    def soil_price(self) -> float:
        return self._soil_price

    @property
    def wall_price(self) -> float:
        return self._wall_price

    # --- bed collection ---

    @property
    def beds(self) -> tuple[Rectangle, ...]:
        """Beds in the current design, in insertion order."""
        return tuple(self._beds)

    def __iter__(self) -> Iterator[Rectangle]:
        return iter(tuple(self._beds))

    def __len__(self) -> int:
        return len(self._beds)

    def add_bed(self, bed: Rectangle) -> None:
        """Append a bed to the design."""
        self._beds.append(bed)
        self._dirty = True

    def add_beds(self, beds: Iterable[Rectangle]) -> None:
        """Append several beds, keeping their order."""
        self._beds.extend(beds)
        self._dirty = True

    def remove_bed(self, bed: Rectangle) -> None:
        """Remove the first bed equal to ``bed``.

        Raises:
            ValueError: If no such bed is in the design.
        """
        try:
            self._beds.remove(bed)
        except ValueError:
            raise ValueError(f"Bed not in design: {bed}") from None
        self._dirty = True

    def clear_beds(self) -> None:
        """Remove every bed from the design."""
        self._beds.clear()
        self._dirty = True

    def read_beds(self, lines: Iterable[str]) -> int:
        """Add every bed described by design file lines.

        The whole input is parsed before anything is added, so a parse
        failure leaves the design unchanged.

        Args:
            lines: Design file lines, e.g. an open text file.

        Returns:
            Number of beds added.

        Raises:
            DesignParseError: If any line is not a valid bed statement.
        """
        beds = parse_beds(lines)
        self.add_beds(beds)
        logger.info(f"Read {len(beds)} garden beds")
        return len(beds)

    # --- totals ---

    def recalculate_totals(self) -> None:
        """Recalculate wall length and garden area over the current beds."""
        self._total_wall_length = 0.0
        self._total_garden_area = 0.0
        for bed in self._beds:
            self._total_garden_area += bed.area
            self._total_wall_length += bed.perimeter
        self._dirty = False
        logger.debug(
            f"Recalculated totals over {len(self._beds)} beds: "
            f"area={self._total_garden_area} m2, walls={self._total_wall_length} m"
        )

    def _ensure_fresh(self) -> None:
        if self._dirty:
            self.recalculate_totals()

    @property
    def total_wall_length(self) -> float:
        """Total length of all bed walls, in metres."""
        self._ensure_fresh()
        return self._total_wall_length

    @property
    def total_garden_area(self) -> float:
        """Total area of all beds, in square metres."""
        self._ensure_fresh()
        return self._total_garden_area

    @property
    def soil_volume(self) -> float:
        """Soil needed to fill every bed, in cubic metres."""
        return self.total_garden_area * SOIL_DEPTH

    @property
    def wall_cost(self) -> float:
        return self.total_wall_length * self._wall_price

    @property
    def soil_cost(self) -> float:
        return self.soil_volume * self._soil_price

    @property
    def total_cost(self) -> float:
        """Total materials cost: walls plus soil."""
        return self.wall_cost + self.soil_cost
