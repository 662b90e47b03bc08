"""Logging setup for the route finder package.

Configures the root handler and the ``route_finder`` logger from
``ObservabilityConfig`` (``RF_LOG_LEVEL``, ``RF_LOG_FORMAT``).
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config

logger = logging.getLogger("route_finder")


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply level and format from the observability settings.

    Safe to call more than once; only the first call installs a handler.
    """
    config = config or get_config().observability
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(level=level, format=config.format)
    logger.setLevel(level)
    logger.debug("Logging configured", extra={"level": config.level})
