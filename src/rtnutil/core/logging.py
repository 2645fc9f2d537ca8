"""Logging setup for the rtnutil package logger."""

from __future__ import annotations

import logging

from rtnutil.core.config import AppSettings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
HANDLER_NAME = "rtnutil-stream"


def configure_logging(settings: AppSettings | None = None) -> logging.Logger:
    """Apply ``settings.log_level`` to the ``rtnutil`` logger.

    Installs one stream handler; repeated calls only update the level.
    """
    if settings is None:
        settings = AppSettings()

    logger = logging.getLogger("rtnutil")
    logger.setLevel(settings.log_level.upper())

    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
