"""Value objects for the garden bed domain."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class GeometryError(ValueError):
    """Raised when a bed shape is built from invalid geometry."""


class BedShape(str, Enum):
    """Shapes a garden bed can take.

    The value doubles as the keyword used in design files.

    Attributes:
        RECTANGLE: A rectangular bed bordered by four straight walls.
    """

    RECTANGLE = "rectangle"


@dataclass(frozen=True)
class Rectangle:
    """A rectangular garden bed.

    Dimensions are in metres. Zero and negative dimensions are accepted
    unchanged; only non-finite values are rejected.

    Attributes:
        width: Width of the bed in metres.
        height: Height (length) of the bed in metres.
    """

    width: float
    height: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.width) and math.isfinite(self.height)):
            raise GeometryError(
                f"Bed dimensions must be finite (got {self.width} x {self.height})"
            )

    @property
    def shape(self) -> BedShape:
        return BedShape.RECTANGLE

    @property
    def area(self) -> float:
        """Internal area of the bed in square metres."""
        return self.width * self.height

    @property
    def perimeter(self) -> float:
        """Total length of the bed walls in metres."""
        return 2 * (self.width + self.height)

    def __str__(self) -> str:
        return f"Rectangle {float(self.width)} {float(self.height)}"
