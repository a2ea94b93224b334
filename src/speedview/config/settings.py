"""
Run configuration for a single measurement view.

Values come from command-line flags first, then environment variables
(optionally loaded from a .env file), then the defaults below.

Environment Variables:
- SPEEDVIEW_HOST: Host resolved by the reachability check
- SPEEDVIEW_TICK_INTERVAL: Seconds between spinner frames
- SPEEDVIEW_DEBUG: Write debug logs to stderr when set to 1
"""

import os
from dataclasses import dataclass
from typing import Any

from dotenv import load_dotenv

from ..services.engine import MeasurementOptions

load_dotenv()

DEFAULT_HOST = "fast.com"
DEFAULT_TICK_INTERVAL = 0.05


@dataclass(frozen=True)
class RunConfig:
    """
    Options fixed at startup for the lifetime of the run.
    """

    measure_upload: bool = False
    """Measure upload speed in addition to download speed"""

    verbose: bool = False
    """Include latency and request metadata"""

    host: str = DEFAULT_HOST
    """Host that must resolve before measuring"""

    tick_interval: float = DEFAULT_TICK_INTERVAL
    """Seconds between spinner frames in interactive mode"""

    check_reachability: bool = True
    """Resolve host before starting the measurement"""

    debug: bool = False
    """Emit debug logging on stderr"""

    @classmethod
    def from_flags(
        cls, upload: bool = False, verbose: bool = False, **overrides: Any
    ) -> "RunConfig":
        """
        Build a config from CLI flags. Verbose output implies upload.

        Args:
            upload: --upload flag
            verbose: --verbose flag
            **overrides: Explicit values for any other field

        Returns:
            RunConfig instance
        """
        values: dict = {
            "host": os.getenv("SPEEDVIEW_HOST", DEFAULT_HOST),
            "tick_interval": float(
                os.getenv("SPEEDVIEW_TICK_INTERVAL", str(DEFAULT_TICK_INTERVAL))
            ),
            "debug": os.getenv("SPEEDVIEW_DEBUG", "0") not in ("", "0", "false"),
        }
        values.update(overrides)
        return cls(measure_upload=upload or verbose, verbose=verbose, **values)

    def options(self) -> MeasurementOptions:
        """Options handed to the measurement engine."""
        return MeasurementOptions(
            measure_upload=self.measure_upload, verbose=self.verbose
        )
