"""Infrastructure layer - output formatting and export."""

from .exporters import JsonExporter
from .formatters import GardenReportFormatter

__all__ = [
    "GardenReportFormatter",
    "JsonExporter",
]
