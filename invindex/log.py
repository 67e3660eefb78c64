"""
Logging setup for the command-line tools.
Library modules log through logging.getLogger(__name__) and never configure handlers.
"""

import logging

from . import config

logger = logging.getLogger("invindex")

_handler: logging.Handler | None = None


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a single stream handler to the package logger and set its level."""
    global _handler
    level = level if level is not None else config.LOG_LEVEL
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(_handler)
    logger.setLevel(level)
    return logger
