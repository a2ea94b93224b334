"""
Terminal UI package.

Pure presentation, the two output sinks, and the managers that drive them
for one measurement run.
"""

from .dashboard import SpeedDashboard
from .presentation import (
    download_settled,
    bufferbloat_settled,
    latency_settled,
    upload_settled,
)
from .state import DisplayContext, RunPhase
from .theme import ICONS, SPINNER_FRAMES, THEME

__all__ = [
    "SpeedDashboard",
    "DisplayContext",
    "RunPhase",
    "download_settled",
    "upload_settled",
    "latency_settled",
    "bufferbloat_settled",
    "THEME",
    "ICONS",
    "SPINNER_FRAMES",
]
