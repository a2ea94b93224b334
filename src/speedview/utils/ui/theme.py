"""
UI Theme configuration: colors, icons, and spinner frames.
"""

from typing import Dict

THEME: Dict[str, str] = {
    # Settle States
    "settled": "green",  # Finished speed figures
    "settled_latency": "white",  # Finished latency figures
    "in_progress": "cyan",  # Figures still changing
    # Text Types
    "muted": "dim",  # Units, separators, placeholders
    "spinner": "dim bright_black",  # Working indicator
    "error": "red",
}

ICONS: Dict[str, str] = {
    "download": "↓",
    "upload": "↑",
    "separator": "/",
}

SPINNER_FRAMES = ["⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏"]
