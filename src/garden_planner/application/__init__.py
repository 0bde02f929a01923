"""Application layer - use cases and orchestration."""

from .commands import DEFAULT_LAYOUT, PlanGardenCommand
from .dtos import GardenReport

__all__ = [
    "DEFAULT_LAYOUT",
    "GardenReport",
    "PlanGardenCommand",
]
