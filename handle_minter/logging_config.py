"""
Logging setup for applications embedding the minter.

Library modules only call `logging.getLogger(__name__)`; nothing is
configured on import.

Log Format:
    2026-10-19 10:15:30 [INFO    ] handle_minter.core.mint - 2 Orders are picked
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)-8s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(log_level: int = logging.INFO, stream: Optional[object] = None) -> logging.Logger:
    """
    Attach a console handler to the `handle_minter` logger.

    Calling it twice does not add a second handler.

    Returns:
        The configured package logger
    """
    logger = logging.getLogger("handle_minter")
    logger.setLevel(log_level)
    if not any(getattr(h, "_handle_minter", False) for h in logger.handlers):
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        handler._handle_minter = True
        logger.addHandler(handler)
    return logger
