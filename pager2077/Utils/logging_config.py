"""
Logging configuration for the pager client.
"""

import sys

from loguru import logger

from ..config import get_cli_log_file_path, get_cli_setting

VALID_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


def get_log_level() -> str:
    """Log level from the [logging] section, defaulting to INFO."""
    level = str(get_cli_setting("logging", "log_level", "INFO")).upper()
    if level not in VALID_LEVELS:
        logger.warning(f"Unknown log level {level!r}, falling back to INFO")
        return "INFO"
    return level


def configure_logging() -> None:
    """
    Configure loguru sinks for the application.

    The terminal belongs to the pager UI, so the console sink is off unless
    enabled in the config. This should be called once at startup.
    """
    level = get_log_level()
    logger.remove()
    logger.add(
        sink=get_cli_log_file_path(),
        level=level,
        rotation="10 MB",
        retention="7 days",
    )

    if get_cli_setting("logging", "console", False):
        logger.add(
            sink=sys.stderr,
            level=level,
            colorize=True
        )

    logger.info(f"Logging configured: level={level}")
