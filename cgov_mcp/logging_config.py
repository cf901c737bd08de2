"""Logging configuration for cgov-mcp.

Everything logs to stderr: in stdio mode stdout carries the protocol stream.
The core parser/matcher/resolver functions do not log.
"""

import logging
import sys

logger = logging.getLogger("cgov_mcp")


def configure_logging(level: str = "INFO") -> None:
    """Configure the package logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR)
    """
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Only add handler if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        logger.addHandler(handler)
