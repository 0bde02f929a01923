"""Pydantic models for garden planner configuration files.

A configuration file is JSON, for example::

    {
      "schema_version": "1.0",
      "prices": {"soil_per_cubic_metre": 81.0, "wall_per_metre": 17.0},
      "design_file": "designs/backyard.txt",
      "output": {"format": "text"}
    }

Every section is optional except ``schema_version``.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Version 1.0: prices, design file and output format
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

# Example prices are roughly based on a local landscaping supplier.
DEFAULT_SOIL_PRICE = 90.00 * 0.9  # 1 cubic metre of organic garden soil
DEFAULT_WALL_PRICE = 51.00 / 3.0  # 200x75mm hardwood sleeper, 3.0m long


class PricesConfig(BaseModel):
    """Unit prices for garden materials.

    Attributes:
        soil_per_cubic_metre: Price of garden soil per cubic metre.
        wall_per_metre: Price of bed wall material per metre.
    """

    model_config = ConfigDict(extra="forbid")

    soil_per_cubic_metre: float = Field(default=DEFAULT_SOIL_PRICE, ge=0)
    wall_per_metre: float = Field(default=DEFAULT_WALL_PRICE, ge=0)


class OutputConfig(BaseModel):
    """Configuration for report output."""

    model_config = ConfigDict(extra="forbid")

    format: Literal["text", "json"] = "text"


class PlannerConfiguration(BaseModel):
    """Root configuration model for the garden planner.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        prices: Unit prices for soil and walls
        design_file: Optional design file to load beds from. When absent the
            default layout is used.
        output: Output format configuration
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0", pattern=r"^\d+\.\d+$")
    prices: PricesConfig = Field(default_factory=PricesConfig)
    design_file: Path | None = None
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported."""
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{v}'. Supported versions: {supported}"
            )
        return v
