"""
Logging for the itkdev_mcp package

One stderr handler sits on the package logger; module loggers created with
logging.getLogger(__name__) propagate to it. stdout is the stdio transport.
"""

import logging
import sys
from typing import Optional

from ..config import Config

PACKAGE_LOGGER = "itkdev_mcp"

LOG_FORMAT = '[%(asctime)s] %(levelname)s [%(name)s] %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(name: Optional[str] = None) -> logging.Logger:
    """
    Attach the stderr handler to a logger and set its level from Config

    Args:
        name: Logger name (default: the package logger, which every
            itkdev_mcp.* module logger inherits from)

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name or PACKAGE_LOGGER)

    if not Config.ENABLE_LOGGING:
        logger.setLevel(logging.CRITICAL)
        return logger

    logger.setLevel(logging.DEBUG if Config.DEBUG else logging.INFO)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    return logger


logger = setup_logging()
