"""
Date helpers shared by request schemas and query filters
"""

from datetime import datetime, time, timezone
from typing import Optional, Tuple

from app.utils.exceptions import InvalidDateRange


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Columns are timezone-naive UTC; convert aware values before storing or comparing"""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def parse_date_param(value: str, end_of_day: bool = False) -> datetime:
    """Parse an ISO date or datetime query parameter.

    A bare date (``2025-03-31``) used as the upper bound covers the whole day.
    """
    raw = (value or "").strip()
    try:
        parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError:
        raise InvalidDateRange(f"Invalid date: {value!r}")

    if end_of_day and "T" not in raw and " " not in raw:
        parsed = datetime.combine(parsed.date(), time.max)

    return to_naive_utc(parsed)


def parse_date_range(start: str, end: str) -> Tuple[datetime, datetime]:
    """Parse an inclusive [start, end] pair; start must not be after end"""
    start_dt = parse_date_param(start)
    end_dt = parse_date_param(end, end_of_day=True)
    if start_dt > end_dt:
        raise InvalidDateRange("startDate must not be after endDate")
    return start_dt, end_dt


def month_bounds(today: datetime) -> Tuple[datetime, datetime]:
    """First instant of the month containing ``today`` and first instant of the next month"""
    first_day = datetime(today.year, today.month, 1)
    if today.month == 12:
        next_month = datetime(today.year + 1, 1, 1)
    else:
        next_month = datetime(today.year, today.month + 1, 1)
    return first_day, next_month
