"""Pytest configuration and shared fixtures for garden planner tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from garden_planner.domain import GardenPlanner, Rectangle

FIXTURES_PATH = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_path() -> Path:
    """Root directory of the test fixture files."""
    return FIXTURES_PATH


@pytest.fixture
def default_beds() -> list[Rectangle]:
    """Two rectangles with a square in the middle."""
    return [Rectangle(2.0, 1.0), Rectangle(2.0, 2.0), Rectangle(2.0, 1.0)]


@pytest.fixture
def planner(default_beds: list[Rectangle]) -> GardenPlanner:
    """Planner with the example prices and the default layout."""
    planner = GardenPlanner(soil_price=81.0, wall_price=17.0)
    planner.add_beds(default_beds)
    planner.recalculate_totals()
    return planner
