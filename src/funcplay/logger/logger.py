"""Global logger configuration for the funcplay project.

The ``funcplay`` logger writes to stdout and does not propagate to the root
logger. Its level comes from ``LOG_LEVEL`` at import time; the playground
entry point re-applies the level from :class:`funcplay.core.config.Settings`
once settings are loaded. Combinators in :mod:`funcplay.functional` stay
silent apart from DEBUG output from ``rasterize``.
"""

import logging
import os
import sys

__all__ = ["logger", "setup_logger"]


def setup_logger(
    name: str = "funcplay",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Handlers are attached only on the first call for a given ``name``. Later
    calls leave the handler alone and only change the level when ``level`` is
    passed explicitly, which is how ``main`` applies ``Settings.log_level``.

    Args:
        name: Logger name (typically project name)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    explicit_level = level
    level = level or os.getenv("LOG_LEVEL", "INFO")
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper()))
        logger.propagate = False
    elif explicit_level is not None:
        logger.setLevel(getattr(logging, explicit_level.upper()))

    return logger


# Create default logger instance for the project
logger = setup_logger()
