"""Renderers package exports."""

import sys
from typing import IO, Optional

from rich.console import Console

from .base import BaseRenderer
from .live import LiveRenderer
from .plain import PlainRenderer


def stream_is_tty(stream: Optional[IO[str]]) -> bool:
    """True only when the stream itself is attached to a terminal."""
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        return False


def terminal_console(stderr: bool = False) -> Console:
    """
    Console for stdout or stderr whose terminal check is the stream's isatty.

    FORCE_COLOR, TTY_COMPATIBLE and similar hints are ignored so a pipe
    never receives live redraws or styling.
    """
    stream = sys.stderr if stderr else sys.stdout
    return Console(stderr=stderr, force_terminal=stream_is_tty(stream))


def select_renderer(console: Console) -> BaseRenderer:
    """Pick the output sink once, based on whether stdout is a terminal."""
    if console.is_terminal:
        return LiveRenderer(console)
    return PlainRenderer(console)


__all__ = [
    "BaseRenderer",
    "LiveRenderer",
    "PlainRenderer",
    "select_renderer",
    "stream_is_tty",
    "terminal_console",
]
