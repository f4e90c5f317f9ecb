"""
Number formatting and unit conversion helpers.
"""

import random
import re
from typing import Union

from .constants import GB, KB, MB, MS_PER_LEAP_YEAR, MS_PER_UNIT

Number = Union[int, float]


# ============================================================================
# Decimal and size formatting
# ============================================================================

def sanitize_decimal(num: Number) -> str:
    """
    Format a number with at most two decimals, dropping trailing zeros.

        sanitize_decimal(2.1091)  # "2.11"
        sanitize_decimal(2.0)     # "2"
        sanitize_decimal(2.10)    # "2.1"
    """
    fixed = f"{num:.2f}"
    # Trim zeros after the point, then a dangling point
    fixed = re.sub(r"(\.\d*?)0*$", r"\1", fixed)
    return re.sub(r"\.$", "", fixed)


def bytes_to_size(size_bytes: Number) -> str:
    """
    Format bytes as a human readable string.

    Uses the largest fitting unit of GB, MB or KB (binary multiples),
    falling back to a plain byte count.

        bytes_to_size(1500000)  # "1.43 MB"
        bytes_to_size(1024)     # "1 KB"
        bytes_to_size(1)        # "1 byte"
        bytes_to_size(0)        # "0 bytes"
    """
    if size_bytes >= GB:
        return f"{sanitize_decimal(size_bytes / GB)} GB"
    elif size_bytes >= MB:
        return f"{sanitize_decimal(size_bytes / MB)} MB"
    elif size_bytes >= KB:
        return f"{sanitize_decimal(size_bytes / KB)} KB"
    elif size_bytes > 1:
        return f"{size_bytes} bytes"
    elif size_bytes == 1:
        return "1 byte"
    else:
        return "0 bytes"


# ============================================================================
# Random numbers
# ============================================================================

def get_random_number(minimum: int, maximum: int) -> int:
    """Random integer between minimum and maximum, both inclusive."""
    return random.randint(minimum, maximum)


# ============================================================================
# Durations and time units
# ============================================================================

def seconds_to_duration(seconds: Number) -> str:
    """
    Format seconds as a clock-style duration.

    Hours are only shown when non-zero and are never rolled into days.

        seconds_to_duration(24)      # "0:24"
        seconds_to_duration(3600)    # "1:00:00"
        seconds_to_duration(172801)  # "48:00:01"
    """
    total = int(seconds)
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)

    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def _ms_per_unit(unit: str, leap_year: bool) -> int:
    if unit == "y" and leap_year:
        return MS_PER_LEAP_YEAR
    try:
        return MS_PER_UNIT[unit]
    except KeyError:
        valid = ", ".join(MS_PER_UNIT)
        raise ValueError(f"Unknown time unit {unit!r} (expected one of: {valid})") from None


def get_unit_in_ms(amount: Number, unit: str, leap_year: bool = False) -> Number:
    """
    Convert an amount of a time unit into milliseconds.

    Args:
        amount: How many of the unit (fractions allowed)
        unit: One of "ms", "s", "m", "h", "d", "w", "y"
        leap_year: Count a year as 366 days instead of 365

    Returns:
        Milliseconds
    """
    return amount * _ms_per_unit(unit, leap_year)


def get_unit_in_seconds(amount: Number, unit: str, leap_year: bool = False) -> Number:
    """Convert an amount of a time unit into seconds. See get_unit_in_ms."""
    return get_unit_in_ms(amount, unit, leap_year) / 1000
