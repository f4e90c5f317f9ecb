"""
Date helpers.

Local dates are rendered in a fixed US-style layout, e.g.
`6/13/2024, 9:45:57 AM`.
"""

from datetime import date, datetime
from typing import Any, Optional
from zoneinfo import ZoneInfo


def format_local_date(moment: datetime, time_zone: Optional[str] = None) -> str:
    """
    Format a datetime as `M/D/YYYY, h:mm:ss AM` in a time zone.

    Args:
        moment: Datetime to format. Naive values are taken as system local time.
        time_zone: IANA zone name (e.g. "Europe/London"). Defaults to the
            system local zone.

    Returns:
        Formatted date string
    """
    tz = ZoneInfo(time_zone) if time_zone else None
    local = moment.astimezone(tz)
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return (
        f"{local.month}/{local.day}/{local.year}, "
        f"{hour}:{local.minute:02d}:{local.second:02d} {meridiem}"
    )


def get_local_date(time_zone: Optional[str] = None) -> str:
    """
    Current date and time in the local format.

        get_local_date()                 # "10/5/2024, 7:15:50 AM"
        get_local_date("Europe/London")  # "10/5/2024, 12:15:50 PM"
    """
    return format_local_date(datetime.now().astimezone(), time_zone)


def is_valid_date(value: Any) -> bool:
    """True for date and datetime instances, False for anything else."""
    return isinstance(value, date)
