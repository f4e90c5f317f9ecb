"""
Shared color definitions for terminal output.
"""


class Colors:
    RESET = "\x1b[0m"
    RED = "\x1b[31m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"


def colorize(text: str, color: str) -> str:
    """Wrap text in a color code and reset afterwards."""
    return f"{color}{text}{Colors.RESET}"
