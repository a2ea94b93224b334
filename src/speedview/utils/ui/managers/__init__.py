"""
Run managers: the stream consumer and the animation ticker.

Both operate on one DisplayContext and one renderer chosen at startup.
"""

from .aggregator import StreamConsumer
from .ticker import AnimationTicker

__all__ = [
    "AnimationTicker",
    "StreamConsumer",
]
