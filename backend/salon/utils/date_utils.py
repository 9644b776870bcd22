"""Date and wall-clock helpers shared by scheduling and reporting.

Appointment dates are ``YYYY-MM-DD`` strings and times are 24-hour ``HH:MM``
strings, exactly as stored.
"""

import calendar
from datetime import date, timedelta
from typing import List, Optional, Tuple

MINUTES_PER_DAY = 24 * 60


def parse_date(value: Optional[str]) -> Optional[date]:
    """Parse ``YYYY-MM-DD``; returns None for empty or malformed values."""
    if not value or not isinstance(value, str):
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


def parse_hhmm(value: str) -> int:
    """Minutes since midnight for an ``HH:MM`` string.

    Raises:
        ValueError: If the value is not a valid 24-hour time.
    """
    hours, sep, minutes = str(value).strip().partition(":")
    if not sep or not hours.isdigit() or not minutes.isdigit():
        raise ValueError(f"Invalid time: {value!r}")
    h, m = int(hours), int(minutes)
    if not (0 <= h < 24 and 0 <= m < 60):
        raise ValueError(f"Invalid time: {value!r}")
    return h * 60 + m


def format_hhmm(total_minutes: int) -> str:
    return f"{total_minutes // 60:02d}:{total_minutes % 60:02d}"


def week_bounds(day: date) -> Tuple[date, date]:
    """Sunday..Saturday week containing ``day`` (both ends inclusive)."""
    # date.weekday(): Monday=0 .. Sunday=6; shift so Sunday=0
    days_since_sunday = (day.weekday() + 1) % 7
    start = day - timedelta(days=days_since_sunday)
    return start, start + timedelta(days=6)


def month_prefix(day: date) -> str:
    return day.strftime("%Y-%m")


def add_months(day: date, months: int) -> date:
    """Shift by calendar months, clamping the day to the target month length."""
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def days_of_month(day: date) -> List[date]:
    """Every date of the month containing ``day``."""
    last_day = calendar.monthrange(day.year, day.month)[1]
    return [date(day.year, day.month, d) for d in range(1, last_day + 1)]
