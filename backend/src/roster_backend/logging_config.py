"""Loguru sink configuration for the backend process."""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan> - <level>{message}</level>"
)

_sink_id: int | None = None


def configure_logging(level: str = "INFO", sink: TextIO | None = None) -> None:
    """Route loguru output to *sink* (stderr by default) at *level*.

    The first call drops loguru's default handler; later calls only replace
    the sink installed here, leaving sinks added by other code in place.
    """
    global _sink_id  # noqa: PLW0603

    if _sink_id is None:
        logger.remove()
    else:
        logger.remove(_sink_id)
    _sink_id = logger.add(
        sys.stderr if sink is None else sink,
        level=level.upper(),
        format=LOG_FORMAT,
    )


__all__ = ["LOG_FORMAT", "configure_logging"]
