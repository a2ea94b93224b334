"""
Host resolution check performed before any measurement starts.
"""

import asyncio
import logging
import socket

from .errors import ReachabilityError

logger = logging.getLogger(__name__)


async def check_reachability(host: str) -> None:
    """
    Resolve the measurement host.

    Args:
        host: Hostname to resolve

    Raises:
        ReachabilityError: If the name cannot be resolved
    """
    loop = asyncio.get_running_loop()
    try:
        await loop.getaddrinfo(host, None)
    except socket.gaierror as e:
        logger.debug("Resolving %s failed: %s", host, e)
        raise ReachabilityError(host, str(e)) from e
    logger.debug("Resolved %s", host)
