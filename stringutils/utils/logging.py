"""Logger configuration built on loguru."""

import sys

from loguru import logger

_FORMAT = "<level>{level: <8}</level> | {name}:{function} - {message}"


def setup_logger(verbose: bool = False, debug: bool = False) -> int:
    """Replace existing loguru handlers with a single stderr sink.

    Args:
        verbose: Show INFO messages
        debug: Show DEBUG messages (implies verbose)

    Returns:
        The handler id of the installed sink
    """
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    else:
        level = "WARNING"

    logger.remove()
    return logger.add(sys.stderr, level=level, format=_FORMAT)
