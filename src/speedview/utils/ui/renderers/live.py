"""
Live renderer: in-place redraw for interactive terminals.
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.live import Live
from rich.text import Text

from ..presentation import final_frame, pending_frame
from ..state import DisplayContext
from ..theme import SPINNER_FRAMES
from .base import BaseRenderer


class LiveRenderer(BaseRenderer):
    """Overwrite the previous frame on every update and tick."""

    interactive = True

    def __init__(self, console: Console):
        super().__init__(console)
        self._live: Optional[Live] = None
        self._spinner = SPINNER_FRAMES[0]
        self.last_frame: Optional[Text] = None

    def start(self) -> None:
        if self._live is not None:
            return
        self._live = Live(
            Text(""),
            console=self.console,
            auto_refresh=False,
            transient=False,
            redirect_stdout=False,
            redirect_stderr=False,
        )
        self._live.start()

    def refresh(self, context: DisplayContext) -> None:
        if context.is_terminal:
            return
        self._draw(
            pending_frame(
                context.snapshot,
                context.measure_upload,
                context.verbose,
                self._spinner,
            )
        )

    def tick(self, context: DisplayContext, spinner: str) -> None:
        self._spinner = spinner
        self.refresh(context)

    def finish(self, context: DisplayContext) -> None:
        try:
            self._draw(
                final_frame(context.snapshot, context.measure_upload, context.verbose)
            )
        finally:
            self._stop()

    def abort(self, context: DisplayContext) -> None:
        self._stop()

    def _draw(self, frame: Text) -> None:
        if self._live is None:
            self.start()
        self.last_frame = frame
        self._live.update(frame, refresh=True)

    def _stop(self) -> None:
        live = self._live
        self._live = None
        if live is not None:
            live.stop()
