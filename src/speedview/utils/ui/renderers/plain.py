"""
Plain renderer: a single unstyled emission for pipes and files.
"""

from rich.text import Text

from ..presentation import plain_report
from ..state import DisplayContext
from .base import BaseRenderer


class PlainRenderer(BaseRenderer):
    """Stay silent until the run is done, then print the figures once."""

    interactive = False

    def finish(self, context: DisplayContext) -> None:
        report = plain_report(
            context.snapshot, context.measure_upload, context.verbose
        )
        self.console.print(Text(report), soft_wrap=True)
