"""Configuration and design file loading with comprehensive error handling.

This module loads JSON configuration files and design files for the garden
planner. File system errors, JSON parsing errors and Pydantic validation
errors are all reported as a single ConfigError with a clear message.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from garden_planner.application.config.schema import PlannerConfiguration

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration and input file errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, json_parse, validation)
        path: Path to the offending file (if applicable)
        details: Additional error details (line/column for JSON, validation errors, etc.)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a dotted path string.

    Examples:
        >>> _format_json_path(("prices", "wall_per_metre"))
        'prices.wall_per_metre'
    """
    return ".".join(str(segment) for segment in loc)


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    """Extract path, message, value and type from each validation error."""
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": _format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for detail in details:
        path = detail["path"]
        message = detail["message"]
        value = detail.get("value")
        if value is not None:
            lines.append(f"  - {path}: {message} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {message}")
    return "\n".join(lines)


def _read_text(path: Path, kind: str) -> str:
    """Read a UTF-8 text file, translating OS errors into ConfigError."""
    if not path.exists():
        raise ConfigError(
            message=f"{kind} not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        return path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading {kind.lower()}: {path}",
            error_type="permission_denied",
            path=path,
        )
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(
            message=f"Error reading {kind.lower()}: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )


def load_config(path: Path) -> PlannerConfiguration:
    """Load and validate a planner configuration from a JSON file.

    Relative ``design_file`` paths are resolved against the directory
    holding the configuration file.

    Args:
        path: Path to the JSON configuration file

    Returns:
        A validated PlannerConfiguration instance

    Raises:
        ConfigError: If the file cannot be loaded or validated.
            The error_type attribute indicates the specific error category:
            - "file_not_found": File does not exist
            - "json_parse": Invalid JSON syntax
            - "validation": Schema validation failed
    """
    content = _read_text(path, "Config file")

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in config file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[
                {
                    "line": e.lineno,
                    "column": e.colno,
                    "message": e.msg,
                }
            ],
        )

    try:
        config = PlannerConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        )

    if config.design_file is not None and not config.design_file.is_absolute():
        config = config.model_copy(
            update={"design_file": path.parent / config.design_file}
        )
    logger.debug(f"Loaded configuration from {path}")
    return config


def load_config_from_dict(data: dict[str, Any]) -> PlannerConfiguration:
    """Load and validate a planner configuration from a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    try:
        return PlannerConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            details=details,
        )


def default_config() -> PlannerConfiguration:
    """Configuration used when no config file is given."""
    return PlannerConfiguration()


def read_design_file(path: Path) -> list[str]:
    """Read the lines of a garden design file.

    Only the file is read here; parsing happens in the domain layer, so a
    missing file is reported before any line is parsed.

    Raises:
        ConfigError: If the file does not exist or cannot be read.
    """
    lines = _read_text(path, "Design file").splitlines()
    logger.debug(f"Read {len(lines)} lines from design file {path}")
    return lines
