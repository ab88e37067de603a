"""
Logging setup for the product API.

One package logger writing to stdout; the level comes from LOG_LEVEL.
"""
import logging
import sys

from .config import settings

logger = logging.getLogger("product_api")
logger.setLevel(settings.log_level)

if not logger.handlers:
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(settings.log_level)
    console_handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    logger.addHandler(console_handler)

# uvicorn installs its own root handlers; keep our lines single.
logger.propagate = False


def get_logger(name: str = None) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Optional suffix, appended to 'product_api'

    Returns:
        Logger instance
    """
    if name:
        return logging.getLogger(f"product_api.{name}")
    return logger
