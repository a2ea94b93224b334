"""
Stream consumer for measurement snapshots.

The consumer is the single writer of display state. It keeps the latest
snapshot, asks the renderer to redraw, and performs the one and only
termination of the run.
"""

from __future__ import annotations

import logging
from typing import AsyncIterable

from ....schemas import Snapshot
from ....services.errors import StreamError
from ..renderers import BaseRenderer
from ..state import DisplayContext, RunPhase
from .ticker import AnimationTicker

logger = logging.getLogger(__name__)


class StreamConsumer:
    """Consume a snapshot stream into a display context."""

    def __init__(
        self,
        context: DisplayContext,
        renderer: BaseRenderer,
        ticker: AnimationTicker,
    ) -> None:
        self._context = context
        self._renderer = renderer
        self._ticker = ticker

    async def consume(self, stream: AsyncIterable[Snapshot]) -> RunPhase:
        """
        Consume until the stream completes or raises.

        Args:
            stream: Async iterable of cumulative snapshots

        Returns:
            RunPhase.DONE after the final render

        Raises:
            StreamError: If the stream or the final render raised; carries
                the original message
        """
        try:
            async for snapshot in stream:
                self._context.update(snapshot)
                self._renderer.refresh(self._context)
        except Exception as e:
            await self._fail()
            logger.debug(
                "Stream failed after %d snapshots: %r", self._context.updates, e
            )
            if isinstance(e, StreamError):
                raise
            raise StreamError(str(e) or type(e).__name__) from e

        self._context.mark_done()
        await self._ticker.stop()
        try:
            self._renderer.finish(self._context)
        except Exception as e:
            logger.debug("Final render failed: %r", e)
            raise StreamError(str(e) or type(e).__name__) from e
        logger.debug("Stream completed after %d snapshots", self._context.updates)
        return self._context.phase

    async def _fail(self) -> None:
        self._context.mark_failed()
        await self._ticker.stop()
        self._renderer.abort(self._context)
