"""Utility modules for orientgrid."""

from orientgrid.utils.logger import ExperimentLogger
from orientgrid.utils.display import PlacementProgress, StatusDisplay, LiveLogger

__all__ = [
    "ExperimentLogger",
    "PlacementProgress",
    "StatusDisplay",
    "LiveLogger",
]
