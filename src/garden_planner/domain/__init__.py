"""Domain layer - core business logic."""

from .design_format import DesignParseError, format_beds, parse_bed_line, parse_beds
from .planner import GARDEN_PLANNER_VERSION, SOIL_DEPTH, GardenPlanner
from .value_objects import BedShape, GeometryError, Rectangle

__all__ = [
    "BedShape",
    "DesignParseError",
    "GARDEN_PLANNER_VERSION",
    "GardenPlanner",
    "GeometryError",
    "Rectangle",
    "SOIL_DEPTH",
    "format_beds",
    "parse_bed_line",
    "parse_beds",
]
