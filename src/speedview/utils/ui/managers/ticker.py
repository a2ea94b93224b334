"""
Animation ticker for the interactive view.

This module owns the spinner and its fixed-rate refresh. It redraws whatever
snapshot is current and never waits for data, so the view keeps moving while
the engine is still searching for servers.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from ..renderers import BaseRenderer
from ..state import DisplayContext
from ..theme import SPINNER_FRAMES

logger = logging.getLogger(__name__)


class AnimationTicker:
    """Drive periodic redraws of the working indicator."""

    def __init__(
        self,
        context: DisplayContext,
        renderer: BaseRenderer,
        interval: float = 0.05,
    ) -> None:
        self._context = context
        self._renderer = renderer
        self._interval = interval

        self._task: Optional[asyncio.Task] = None
        self._frame_idx = 0
        self.frames_drawn = 0

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Schedule ticks on the running loop. No-op for non-interactive sinks."""
        if not self._renderer.interactive or self._task is not None:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.debug("Ticker started (%.3fs)", self._interval)

    async def stop(self) -> None:
        """Cancel the tick task and wait until it is gone."""
        task = self._task
        self._task = None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.debug("Ticker stopped after %d frames", self.frames_drawn)

    def tick(self) -> None:
        """Draw one frame unless the run has already terminated."""
        if self._context.is_terminal:
            return
        spinner = SPINNER_FRAMES[self._frame_idx % len(SPINNER_FRAMES)]
        self._frame_idx += 1
        self._renderer.tick(self._context, spinner)
        self.frames_drawn += 1

    async def _run(self) -> None:
        loop = asyncio.get_running_loop()
        deadline = loop.time()
        while not self._context.is_terminal:
            self.tick()
            # Fixed period, independent of render time.
            deadline = max(deadline + self._interval, loop.time())
            await asyncio.sleep(max(0.0, deadline - loop.time()))
