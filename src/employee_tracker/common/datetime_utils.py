from __future__ import annotations

import calendar
import math
from datetime import date, datetime, time, timedelta
from typing import Optional, Union


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Wrapped so tests can patch it.
    """
    return datetime.now()


def today_local() -> date:
    return now_local().date()


def parse_clock(value: str) -> Optional[time]:
    """Parse ``HH:MM`` or ``HH:MM:SS``; returns None for anything else."""
    value = (value or "").strip()
    for fmt in ("%H:%M", "%H:%M:%S"):
        try:
            return datetime.strptime(value, fmt).time()
        except ValueError:
            continue
    return None


def combine_time(day: date, value: Union[str, datetime, time, None]) -> Optional[datetime]:
    """Attach a clock value to ``day``.

    Accepts ``HH:MM[:SS]`` strings, full ISO datetimes, ``time`` and
    ``datetime`` objects. Raises ValueError for unparseable strings.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, time):
        return datetime.combine(day, value)

    clock = parse_clock(value)
    if clock is not None:
        return datetime.combine(day, clock)
    return datetime.fromisoformat(value.strip().replace("Z", ""))


def hours_between(start: Optional[datetime], end: Optional[datetime]) -> Optional[float]:
    if not start or not end or end <= start:
        return None
    return round((end - start).total_seconds() / 3600, 2)


def minutes_between(start: time, end: time) -> int:
    s = start.hour * 60 + start.minute
    e = end.hour * 60 + end.minute
    return e - s


def format_clock(value: Optional[datetime], *, with_seconds: bool = False) -> Optional[str]:
    if value is None:
        return None
    return value.strftime("%H:%M:%S" if with_seconds else "%H:%M")


def iso(value: Union[date, datetime, None]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def month_bounds(year: int, month: int) -> tuple[date, date]:
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def working_days_in_month(year: int, month: int) -> int:
    """Days of the month excluding Sundays."""
    start, end = month_bounds(year, month)
    days = 0
    current = start
    while current <= end:
        if current.weekday() != 6:
            days += 1
        current += timedelta(days=1)
    return days


def days_elapsed(start: datetime, end: datetime) -> int:
    return max(0, (end - start).days)


def ceil_days(start: datetime, end: datetime) -> int:
    seconds = (end - start).total_seconds()
    return max(0, math.ceil(seconds / 86400))


def format_hours_hms(hours: Optional[float]) -> str:
    """Render decimal hours as ``HH:MM:SS``."""
    total_seconds = int(round((hours or 0) * 3600))
    h, rem = divmod(total_seconds, 3600)
    m, s = divmod(rem, 60)
    return f"{h:02d}:{m:02d}:{s:02d}"
