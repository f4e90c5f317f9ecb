"""
Terminal output module.

Handles colors, the timestamped logger and boxed tables.
"""

from .colors import Colors, colorize
from .logger import Logger, create_logger, empty_log

__all__ = [
    # Colors
    "Colors",
    "colorize",
    # Logging
    "Logger",
    "create_logger",
    "empty_log",
]
