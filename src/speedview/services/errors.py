"""
Error types surfaced to the user.

Every error here ends the run with a non-zero exit status. Messages are shown
verbatim on stderr.
"""


class SpeedViewError(Exception):
    """Base class for all run-terminating errors."""


class ReachabilityError(SpeedViewError):
    """The measurement host could not be resolved."""

    def __init__(self, host: str, reason: str = ""):
        self.host = host
        self.reason = reason
        super().__init__("Please check your internet connection.")


class StreamError(SpeedViewError):
    """The measurement stream raised after possibly emitting snapshots."""


class ReplayFormatError(StreamError):
    """A replay file line is not a valid snapshot."""
