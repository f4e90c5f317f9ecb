"""
Colored, timestamped terminal logger.

Every line starts with the current date, e.g.

    [6/13/2024, 9:45:57 AM] Hello!

`success` lines are green, `error` lines red and `warning` lines yellow.
Dicts, lists and callables are printed as-is without color.
"""

import sys
from typing import Any, Optional, TextIO

from ..config import LoggerConfig
from ..core.dates import get_local_date
from .colors import Colors, colorize


def _is_structured(item: Any) -> bool:
    return isinstance(item, (dict, list, tuple, set)) or callable(item)


def _render_item(item: Any, color: Optional[str]) -> str:
    if _is_structured(item):
        return repr(item)
    text = str(item)
    return colorize(text, color) if color else text


class Logger:
    """
    Logger with text, success, error and warning methods.

    Output goes to stdout unless another stream is given.
    """

    def __init__(self, config: Optional[LoggerConfig] = None, stream: Optional[TextIO] = None):
        self.config = config or LoggerConfig()
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so redirected/captured stdout is honoured
        return self._stream if self._stream is not None else sys.stdout

    def _emit(self, color: Optional[str], items: tuple):
        parts = []
        if self.config.include_time:
            stamp = f"[{get_local_date(self.config.time_zone)}]"
            parts.append(colorize(stamp, color) if color else stamp)
        parts.extend(_render_item(item, color) for item in items)
        print(" ".join(parts), file=self.stream)

    def text(self, *items: Any):
        """Log without color."""
        self._emit(None, items)

    def success(self, *items: Any):
        self._emit(Colors.GREEN, items)

    def error(self, *items: Any):
        self._emit(Colors.RED, items)

    def warning(self, *items: Any):
        self._emit(Colors.YELLOW, items)


class _EmptyLog:
    """Drop-in for Logger that prints nothing."""

    def text(self, *items: Any):
        pass

    def success(self, *items: Any):
        pass

    def error(self, *items: Any):
        pass

    def warning(self, *items: Any):
        pass


def create_logger(
    time_zone: Optional[str] = None,
    include_time: bool = True,
    stream: Optional[TextIO] = None,
) -> Logger:
    """
    Create a colored, timestamped logger.

    Args:
        time_zone: IANA zone used for timestamps (default: system local)
        include_time: Prefix each line with the current date
        stream: Where to write (default: stdout)

    Example:
        log = create_logger(time_zone="Europe/London")
        log.text("Hello!")  # [6/13/2024, 9:45:57 AM] Hello!
    """
    return Logger(LoggerConfig(time_zone=time_zone, include_time=include_time), stream)


# For callers that want a silent logger without changing call sites:
#
#     logger = empty_log if quiet else create_logger()
empty_log = _EmptyLog()
