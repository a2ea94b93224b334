"""
Measurement engine contract and the bundled snapshot producers.

The render loop only depends on MeasurementEngine.stream(): a finite,
non-restartable async sequence of cumulative snapshots that either completes
or raises. How the numbers are obtained is the engine's business.
"""

from __future__ import annotations

import asyncio
import logging
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, AsyncIterator, Dict, Optional

from pydantic import ValidationError

from ..schemas import ClientInfo, Snapshot
from .errors import ReplayFormatError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MeasurementOptions:
    """Options handed to the engine when a measurement starts."""

    measure_upload: bool = False
    verbose: bool = False


class MeasurementEngine(ABC):
    """
    Producer of measurement snapshots.

    Implementations emit cumulative state: every snapshot carries all fields
    known so far, so a consumer can simply keep the latest one.
    """

    @abstractmethod
    def stream(self, options: MeasurementOptions) -> AsyncIterator[Snapshot]:
        """
        Start a measurement and yield progress snapshots.

        Args:
            options: Upload and verbosity options

        Returns:
            Async iterator of snapshots; the last one has is_done set
        """
        ...


class SimulatedEngine(MeasurementEngine):
    """
    Engine that fabricates a plausible measurement without touching the network.

    Download ramps up first, latency and bufferbloat settle while it runs
    (verbose only), then upload ramps up when requested.
    """

    def __init__(
        self,
        download_target: float = 87.0,
        upload_target: float = 23.0,
        steps: int = 12,
        step_delay: float = 0.25,
        seed: Optional[int] = None,
    ):
        self._download_target = download_target
        self._upload_target = upload_target
        self._steps = max(steps, 1)
        self._step_delay = step_delay
        self._rng = random.Random(seed)

    def _ramp(self, target: float, step: int) -> float:
        progress = (step + 1) / self._steps
        jitter = self._rng.uniform(-0.05, 0.05) * target
        value = target * progress + (jitter if step + 1 < self._steps else 0.0)
        value = max(value, 0.1)
        return round(value) if value >= 10 else round(value, 1)

    async def stream(self, options: MeasurementOptions) -> AsyncIterator[Snapshot]:
        state: Dict[str, Any] = {
            "download_unit": "Mbps",
        }
        if options.verbose:
            state["client"] = ClientInfo(
                location="Amsterdam, NL", ip="203.0.113.7", isp="Example ISP"
            )
            state["server_locations"] = "Amsterdam, NL | Frankfurt, DE"
            state["latency_unit"] = "ms"
            state["bufferbloat_unit"] = "ms"

        for step in range(self._steps):
            await asyncio.sleep(self._step_delay)
            state["download_speed"] = self._ramp(self._download_target, step)
            if options.verbose:
                state["latency"] = 9
                state["is_latency_done"] = step >= 1
                state["bufferbloat"] = 9 + round(step * 2.5)
                state["is_bufferbloat_done"] = step + 1 == self._steps
            yield Snapshot(**state)

        if options.measure_upload:
            state["upload_unit"] = "Mbps"
            for step in range(self._steps):
                await asyncio.sleep(self._step_delay)
                state["upload_speed"] = self._ramp(self._upload_target, step)
                yield Snapshot(**state)

        state["is_done"] = True
        logger.debug("Simulated measurement finished")
        yield Snapshot(**state)


class ReplayEngine(MeasurementEngine):
    """
    Engine that plays back newline-delimited JSON snapshots from a file.

    Each non-blank line must be one snapshot object using the engine's
    camelCase keys, e.g. {"downloadSpeed": 17, "downloadUnit": "Mbps"}.
    """

    def __init__(self, path: Path, step_delay: float = 0.0):
        self._path = Path(path)
        self._step_delay = step_delay

    async def stream(self, options: MeasurementOptions) -> AsyncIterator[Snapshot]:
        _ = options
        with open(self._path, "r", encoding="utf-8") as f:
            for lineno, line in enumerate(f, start=1):
                if not line.strip():
                    continue
                try:
                    snapshot = Snapshot.model_validate_json(line)
                except ValidationError as e:
                    raise ReplayFormatError(
                        f"{self._path}:{lineno}: invalid snapshot "
                        f"({e.error_count()} errors)"
                    ) from e
                if self._step_delay:
                    await asyncio.sleep(self._step_delay)
                yield snapshot
