"""
Logging Setup
Configures loguru sinks for the deployment scripts
"""

import os
import sys
from loguru import logger


CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}"
DEFAULT_LEVEL = "WARNING"


def resolve_level(level: str = None) -> str:
    """
    Console level name, WARNING when unset or unknown to loguru

    Args:
        level: Level name (None = LOG_LEVEL)
    """
    name = (level or os.getenv('LOG_LEVEL') or DEFAULT_LEVEL).upper()

    try:
        logger.level(name)
    except ValueError:
        return DEFAULT_LEVEL

    return name


def configure_logging(level: str = None, log_file: str = None):
    """
    Replace loguru's default sink

    Console stays at WARNING unless LOG_LEVEL says otherwise so that the
    deployment outcome line is the only regular output.

    Args:
        level: Console level (None = LOG_LEVEL or WARNING)
        log_file: Optional log file (None = LOG_FILE)
    """
    logger.remove()
    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level=resolve_level(level)
    )

    log_file = log_file or os.getenv('LOG_FILE')
    if log_file:
        logger.add(
            log_file,
            rotation="1 day",
            retention="7 days",
            format=FILE_FORMAT,
            level="DEBUG"
        )
