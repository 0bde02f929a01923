"""Typer CLI for garden costing."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from garden_planner.application import GardenReport, PlanGardenCommand
from garden_planner.application.config import (
    ConfigError,
    default_config,
    load_config,
    merge_config_with_cli,
)
from garden_planner.domain import DesignParseError
from garden_planner.infrastructure import GardenReportFormatter, JsonExporter

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="garden-planner",
    help="Estimate wall and soil costs for a layout of garden beds.",
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _render(report: GardenReport, output_format: str) -> str:
    if output_format == "json":
        return JsonExporter().export(report)
    return GardenReportFormatter().format(report)


@app.command()
def plan(
    soil_price: Annotated[
        float | None,
        typer.Argument(help="Price of garden soil per cubic metre"),
    ] = None,
    wall_price: Annotated[
        float | None,
        typer.Argument(help="Price of bed wall material per metre"),
    ] = None,
    design_file: Annotated[
        Path | None,
        typer.Argument(help="Garden design file (default: built-in layout)"),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    output_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Output format: text, json"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the report to a file instead of stdout"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Cost a garden design.

    With no arguments the example prices and the default layout are used.
    Give SOIL_PRICE and WALL_PRICE to override the prices, and DESIGN_FILE
    to load the beds from a design file.

    Example:
        garden-planner 81 17 backyard.txt
    """
    _configure_logging(verbose)

    if soil_price is not None and wall_price is None:
        typer.echo("Error: WALL_PRICE is required when SOIL_PRICE is given", err=True)
        raise typer.Exit(code=1)

    try:
        config = load_config(config_file) if config_file else default_config()
        config = merge_config_with_cli(
            config,
            soil_price=soil_price,
            wall_price=wall_price,
            design_file=design_file,
            output_format=output_format,
        )
        report = PlanGardenCommand().execute_config(config)
    except (ConfigError, DesignParseError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    text = _render(report, config.output.format)
    if output_file:
        output_file.write_text(text + "\n", encoding="utf-8")
        logger.info(f"Wrote report to {output_file}")
        typer.echo(f"Report written to {output_file}")
    else:
        typer.echo(text)


if __name__ == "__main__":
    app()
