"""Configuration schema and loading system for the garden planner.

Public API:
    - PlannerConfiguration: Root configuration model
    - PricesConfig: Unit prices for soil and walls
    - OutputConfig: Output format configuration model
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - default_config: Configuration used when no file is given
    - read_design_file: Read the lines of a design file
    - merge_config_with_cli: Apply CLI overrides to a configuration
    - ConfigError: Exception for configuration and input file errors

Example:
    >>> from pathlib import Path
    >>> from garden_planner.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("garden.json"))
    ...     print(f"Soil: {config.prices.soil_per_cubic_metre}/m3")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from garden_planner.application.config.loader import (
    ConfigError,
    default_config,
    load_config,
    load_config_from_dict,
    read_design_file,
)
from garden_planner.application.config.merger import merge_config_with_cli
from garden_planner.application.config.schema import (
    DEFAULT_SOIL_PRICE,
    DEFAULT_WALL_PRICE,
    SUPPORTED_VERSIONS,
    OutputConfig,
    PlannerConfiguration,
    PricesConfig,
)

__all__ = [
    "ConfigError",
    "DEFAULT_SOIL_PRICE",
    "DEFAULT_WALL_PRICE",
    "OutputConfig",
    "PlannerConfiguration",
    "PricesConfig",
    "SUPPORTED_VERSIONS",
    "default_config",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
    "read_design_file",
]
