"""
Base renderer class for the output sink.
"""

from abc import ABC, abstractmethod

from rich.console import Console

from ..state import DisplayContext


class BaseRenderer(ABC):
    """
    Abstract output sink.

    One variant is chosen at startup and kept for the whole run. Intermediate
    hooks default to no-ops; only finish() is mandatory.
    """

    interactive: bool = False

    def __init__(self, console: Console):
        self.console = console

    def start(self) -> None:
        """Prepare the output target before the first frame."""
        return

    def refresh(self, context: DisplayContext) -> None:
        """Redraw after the stream delivered a new snapshot."""
        return

    def tick(self, context: DisplayContext, spinner: str) -> None:
        """Redraw one animation frame."""
        return

    @abstractmethod
    def finish(self, context: DisplayContext) -> None:
        """Emit the final, settled output. Called once, after DONE."""
        pass

    def abort(self, context: DisplayContext) -> None:
        """Release the output target after a failure, leaving output as-is."""
        return
