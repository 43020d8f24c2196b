"""Logger for the Lunatic package.

Library modules log through `logger` and never configure output.
Applications (and the demo script) call `setup_logger` to get a handler.
"""

import logging
import os
import sys

__all__ = ["logger", "setup_logger"]

logger = logging.getLogger("lunatic")
logger.addHandler(logging.NullHandler())


def setup_logger(
    name: str = "lunatic",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Attach a stdout handler to a logger and set its level.

    Args:
        name: Logger name (defaults to the package logger)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL);
            falls back to the LOG_LEVEL environment variable, then WARNING
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or os.getenv("LOG_LEVEL", "WARNING")
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    configured = logging.getLogger(name)

    # Configure once; a NullHandler alone does not count
    if not any(not isinstance(h, logging.NullHandler) for h in configured.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S"))
        configured.addHandler(handler)
        configured.setLevel(getattr(logging, level.upper()))
        configured.propagate = False

    return configured
