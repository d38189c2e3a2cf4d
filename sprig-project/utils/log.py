# What it does: Sets up diagnostic logging for a sprig invocation
# How it does: Replaces loguru's default handler with a single stderr sink at the configured level. Command output itself is printed to stdout and never goes through the logger

import sys

from loguru import logger

from utils import errors

LOG_FORMAT = "<level>{level: <8}</level> | {name}:{function} - {message}"


def check_level(level): # Raises InvalidLogLevel unless loguru knows the level name
    try:
        logger.level(level)
    except (TypeError, ValueError):
        raise errors.InvalidLogLevel(f"Invalid log level: {level}")


def configure_logging(level="WARNING", sink=None):
    # Validated before the current handlers are dropped
    check_level(level)
    logger.remove()
    logger.add(sink or sys.stderr, level=level, format=LOG_FORMAT, colorize=False)
    return logger
