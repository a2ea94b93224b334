"""
Measurement sources and the checks that run before them.
"""

from .engine import (
    MeasurementEngine,
    MeasurementOptions,
    ReplayEngine,
    SimulatedEngine,
)
from .errors import ReachabilityError, ReplayFormatError, SpeedViewError, StreamError
from .reachability import check_reachability

__all__ = [
    "MeasurementEngine",
    "MeasurementOptions",
    "ReplayEngine",
    "SimulatedEngine",
    "ReachabilityError",
    "ReplayFormatError",
    "SpeedViewError",
    "StreamError",
    "check_reachability",
]
