"""
State management for the UI: the display context shared by one run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ...config import RunConfig
from ...schemas import Snapshot


class RunPhase(Enum):
    """Lifecycle of a single measurement view."""

    AWAITING_FIRST_DATA = "awaiting_first_data"
    RECEIVING = "receiving"
    DONE = "done"
    FAILED = "failed"


TERMINAL_PHASES = (RunPhase.DONE, RunPhase.FAILED)


@dataclass
class DisplayContext:
    """
    Current display state for one run.

    The stream consumer is the only writer; the ticker and renderers only read.
    A snapshot replaces the previous one wholesale.
    """

    measure_upload: bool = False
    verbose: bool = False
    snapshot: Snapshot = field(default_factory=Snapshot)
    phase: RunPhase = RunPhase.AWAITING_FIRST_DATA
    updates: int = 0

    @classmethod
    def from_config(cls, config: RunConfig) -> "DisplayContext":
        return cls(measure_upload=config.measure_upload, verbose=config.verbose)

    @property
    def is_terminal(self) -> bool:
        return self.phase in TERMINAL_PHASES

    @property
    def has_data(self) -> bool:
        return self.snapshot.has_data

    def update(self, snapshot: Snapshot) -> None:
        """Replace the current snapshot."""
        if self.is_terminal:
            raise RuntimeError(f"Cannot update display state in phase {self.phase}")
        self.snapshot = snapshot
        self.updates += 1
        if snapshot.has_data and self.phase == RunPhase.AWAITING_FIRST_DATA:
            self.phase = RunPhase.RECEIVING

    def mark_done(self) -> None:
        self._terminate(RunPhase.DONE)

    def mark_failed(self) -> None:
        self._terminate(RunPhase.FAILED)

    def _terminate(self, phase: RunPhase) -> None:
        if self.is_terminal:
            raise RuntimeError(f"Run already terminated ({self.phase.value})")
        self.phase = phase
