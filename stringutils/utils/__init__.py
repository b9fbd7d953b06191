"""Utility functions for stringutils."""

from stringutils.utils.constants import Constants
from stringutils.utils.logging import setup_logger

__all__ = [
    "Constants",
    "setup_logger",
]
