"""Logging setup for the command-line entry point."""

from __future__ import annotations

import logging
import sys

from .config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int | None = None) -> logging.Logger:
    """
    Point the package logger at the current stderr.

    stdout is reserved for operation output, so records never go there.
    A handler left by an earlier call is detached without flushing, since
    the stream it wrapped may already be closed.
    """
    logger = logging.getLogger("userfile")
    if level is None:
        level = get_settings().log_level
    for old in [h for h in logger.handlers if getattr(h, "_userfile", False)]:
        logger.removeHandler(old)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._userfile = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
