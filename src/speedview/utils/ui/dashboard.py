"""
Dashboard facade.

This module wires one run together: reachability check, renderer selection,
display context, ticker and stream consumer. Callers only need run(), which
returns the process exit status.
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.text import Text

from ...config import RunConfig
from ...services import MeasurementEngine, check_reachability
from ...services.errors import ReachabilityError, StreamError
from .managers import AnimationTicker, StreamConsumer
from .renderers import BaseRenderer, select_renderer, terminal_console
from .state import DisplayContext
from .theme import THEME

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


class SpeedDashboard:
    """
    Render one measurement from start to exit status.

    The console for stdout decides the output strategy; errors always go to
    the separate stderr console.
    """

    def __init__(
        self,
        config: RunConfig,
        engine: MeasurementEngine,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
    ) -> None:
        self.config = config
        self.console = console or terminal_console()
        self.error_console = error_console or terminal_console(stderr=True)
        self._engine = engine

        self.renderer: Optional[BaseRenderer] = None
        self.context: Optional[DisplayContext] = None

    async def run(self) -> int:
        if self.config.check_reachability:
            try:
                await check_reachability(self.config.host)
            except ReachabilityError as e:
                self._report_error(str(e), style=THEME["error"])
                return EXIT_FAILURE

        self.renderer = select_renderer(self.console)
        self.context = DisplayContext.from_config(self.config)
        ticker = AnimationTicker(
            self.context, self.renderer, interval=self.config.tick_interval
        )
        consumer = StreamConsumer(self.context, self.renderer, ticker)
        logger.debug(
            "Starting run (interactive=%s, upload=%s, verbose=%s)",
            self.renderer.interactive,
            self.config.measure_upload,
            self.config.verbose,
        )

        self.renderer.start()
        ticker.start()
        try:
            await consumer.consume(self._engine.stream(self.config.options()))
        except StreamError as e:
            self._report_error(str(e))
            return EXIT_FAILURE
        finally:
            if not self.context.is_terminal:
                await ticker.stop()
                self.renderer.abort(self.context)
        return EXIT_OK

    def _report_error(self, message: str, style: str = "") -> None:
        self.error_console.print(Text(message, style=style), soft_wrap=True)
