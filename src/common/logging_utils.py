# src/common/logging_utils.py

import logging

from config import LOG_LEVEL


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Call once at program start (src/game/main.py)."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
