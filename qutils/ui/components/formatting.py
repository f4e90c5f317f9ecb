"""
ANSI-aware text measurement.

Terminal color codes take up no horizontal space, so anything that lines
text up in columns has to measure strings with them removed.
"""

import re

# SGR sequences: ESC [ ... m
ANSI_SGR_PATTERN = re.compile(r"\x1b\[[^m]*m")


def strip_ansi(text: str) -> str:
    """Remove ANSI escape codes from text."""
    return ANSI_SGR_PATTERN.sub("", text)


def get_true_string_length(text: str) -> int:
    """
    Visible length of text once printed to a terminal.

        get_true_string_length("\\x1b[31mred text\\x1b[0m")  # 8
    """
    return len(strip_ansi(text))


def pad_visible(text: str, width: int) -> str:
    """Right-pad text with spaces up to a visible width. Never truncates."""
    return text + " " * max(0, width - get_true_string_length(text))
