"""
Date utilities for calculators.

Provides date coercion and day arithmetic. Inputs may be date, datetime or
ISO 8601 strings; unparsable inputs raise, so callers should validate dates
before doing arithmetic on them.
"""
import math
from datetime import date, datetime, timedelta
from typing import Union

DateLike = Union[date, datetime, str]

SECONDS_PER_DAY = 24 * 60 * 60


def coerce_date(v: DateLike) -> Union[date, datetime]:
    """
    Convert input to a date or datetime.

    Strings with a time part ('2025-01-01T12:00') become datetimes,
    plain ISO dates ('2025-01-01') become dates.

    Raises:
        ValueError: If the string is not ISO formatted
        TypeError: If the input is not a str, date or datetime
    """
    if isinstance(v, (date, datetime)):
        return v
    if isinstance(v, str):
        text = v.strip()
        try:
            if "T" in text or " " in text:
                return datetime.fromisoformat(text)
            return date.fromisoformat(text)
        except ValueError as e:
            raise ValueError(f"Input must be an ISO date string (YYYY-MM-DD). Error: {e}")
    raise TypeError(f"Input must be a str, date or datetime, got {type(v)}")


def _as_datetime(v: Union[date, datetime]) -> datetime:
    # datetime is a subclass of date, check it first
    if isinstance(v, datetime):
        return v
    return datetime(v.year, v.month, v.day)


def days_between(date1: DateLike, date2: DateLike) -> int:
    """
    Absolute number of days between two dates, rounded half-up.

    Examples:
        >>> days_between(date(2025, 1, 1), date(2025, 3, 1))
        59
        >>> days_between("2025-01-02", "2025-01-01T12:00")  # 12 hours -> rounds up
        1
    """
    first = _as_datetime(coerce_date(date1))
    second = _as_datetime(coerce_date(date2))
    seconds = abs((first - second).total_seconds())
    return math.floor(seconds / SECONDS_PER_DAY + 0.5)


def add_days(value: DateLike, days: float) -> Union[date, datetime]:
    """
    Return a new date (or datetime) offset by the given number of days.

    Negative values move backwards. The input is never modified.

    Example:
        >>> add_days(date(2025, 1, 31), 1)
        datetime.date(2025, 2, 1)
    """
    return coerce_date(value) + timedelta(days=days)
