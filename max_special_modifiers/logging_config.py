"""Logging setup for the mod."""

import logging

from max_special_modifiers.core.constants import LOG_PREFIX

LOGGER_NAME = "max_special_modifiers"
LOG_FORMAT = f"{LOG_PREFIX} %(levelname)s %(name)s: %(message)s"


def configure_logging(debug: bool = False) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Safe to call more than once; only the level changes on later calls.

    Args:
        debug: Log DEBUG messages (per-bonus maximization, skips).

    Returns:
        The package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if not any(getattr(h, "_msm_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._msm_handler = True
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    return logger
