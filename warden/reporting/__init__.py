"""Report output — JSON files and console summaries."""

from warden.reporting.console import print_summary
from warden.reporting.json import JsonRenderer

__all__ = ["JsonRenderer", "print_summary"]
