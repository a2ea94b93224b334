"""
Centralized logging configuration.

Diagnostics always go to stderr so that piped stdout carries only the final
measurement text.
"""

import logging
import sys


NOISY_LIBRARIES = [
    "asyncio",
    "markdown_it",
]

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class NullHandler(logging.Handler):
    """Handler that discards all log records."""

    def emit(self, record):
        pass


def setup_logging(verbose: bool = False) -> None:
    """
    Configure logging levels and silence third-party loggers.

    Args:
        verbose: If True, emit speedview debug records. If False, only
            warnings and errors reach stderr.
    """
    logging.basicConfig(stream=sys.stderr, format=LOG_FORMAT)

    for logger_name in NOISY_LIBRARIES:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.CRITICAL)
        logger.propagate = False
        logger.handlers = [NullHandler()]

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.WARNING)
    logging.getLogger("speedview").setLevel(
        logging.DEBUG if verbose else logging.WARNING
    )
