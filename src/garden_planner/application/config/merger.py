"""Configuration merging utilities for CLI override support.

Precedence: CLI args > config values > defaults. Only non-None CLI
arguments override configuration values.
"""

from pathlib import Path
from typing import Any

from garden_planner.application.config.loader import load_config_from_dict
from garden_planner.application.config.schema import PlannerConfiguration


def merge_config_with_cli(
    config: PlannerConfiguration,
    *,
    soil_price: float | None = None,
    wall_price: float | None = None,
    design_file: Path | None = None,
    output_format: str | None = None,
) -> PlannerConfiguration:
    """Merge CLI arguments with configuration values.

    The merged values are validated again, so an out-of-range CLI price is
    reported the same way as one in a config file.

    Args:
        config: The base PlannerConfiguration to merge with
        soil_price: Override for prices.soil_per_cubic_metre (if not None)
        wall_price: Override for prices.wall_per_metre (if not None)
        design_file: Override for design_file (if not None)
        output_format: Override for output.format (if not None)

    Returns:
        A new PlannerConfiguration with merged values

    Raises:
        ConfigError: If the merged configuration fails validation.

    Example:
        >>> merged = merge_config_with_cli(PlannerConfiguration(), wall_price=20.0)
        >>> merged.prices.wall_per_metre
        20.0
    """
    prices = config.prices
    data: dict[str, Any] = {
        "schema_version": config.schema_version,
        "prices": {
            "soil_per_cubic_metre": (
                soil_price if soil_price is not None else prices.soil_per_cubic_metre
            ),
            "wall_per_metre": (
                wall_price if wall_price is not None else prices.wall_per_metre
            ),
        },
        "design_file": design_file if design_file is not None else config.design_file,
        "output": {
            "format": output_format if output_format is not None else config.output.format,
        },
    }
    return load_config_from_dict(data)
