import sys
from typing import Optional

from loguru import logger as loguru_logger

from parking_allocator.config.settings_env import settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "{thread.name} | <cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def initialize_logger(dev_mode: Optional[bool] = None):
    """Send loguru output to stderr, TRACE while developing and INFO otherwise.

    ``dev_mode`` defaults to ``settings.DEV_MODE``. The thread name is part of
    every line so interleaved park/unpark calls can be told apart.
    """
    if dev_mode is None:
        dev_mode = settings.DEV_MODE

    loguru_logger.remove()
    loguru_logger.add(sys.stderr, level="TRACE" if dev_mode else "INFO", format=LOG_FORMAT)
    return loguru_logger
