"""Calendar rule helpers.

All helpers are pure functions over plain ``datetime.date`` values. Months are
1-12 and weekdays follow ``date.weekday()`` (Monday=0 ... Sunday=6), so no
timestamp or timezone is ever involved in deriving a day of week.
"""

from __future__ import annotations

import calendar as _cal
from datetime import date, timedelta

MONDAY = 0
TUESDAY = 1
WEDNESDAY = 2
THURSDAY = 3
FRIDAY = 4
SATURDAY = 5
SUNDAY = 6

WEEKDAY_NAMES: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


def nth_weekday_of_month(year: int, month: int, weekday: int, n: int) -> date:
    """Get the n-th occurrence of ``weekday`` in a month.

    Scans forward from the 1st of the month counting matching weekdays.

    Args:
        year: Full year like 2024
        month: Month number 1-12
        weekday: Target weekday (Monday=0)
        n: Ordinal, 1-based

    Returns:
        Date of the n-th occurrence

    Examples:
        >>> nth_weekday_of_month(2024, 1, MONDAY, 3)
        datetime.date(2024, 1, 15)
    """
    if n < 1:
        raise ValueError(f"Ordinal must be >= 1, got {n}")

    _, days_in_month = _cal.monthrange(year, month)
    count = 0
    for day in range(1, days_in_month + 1):
        current = date(year, month, day)
        if current.weekday() == weekday:
            count += 1
            if count == n:
                return current

    raise ValueError(f"{year}-{month:02d} has fewer than {n} {WEEKDAY_NAMES[weekday]}s")


def last_weekday_of_month(year: int, month: int, weekday: int) -> date:
    """Get the last occurrence of ``weekday`` in a month.

    Scans backward from the last calendar day of the month.
    """
    _, days_in_month = _cal.monthrange(year, month)
    current = date(year, month, days_in_month)
    while current.weekday() != weekday:
        current -= timedelta(days=1)
    return current


def easter_sunday(year: int) -> date:
    """Western (Gregorian) Easter Sunday via the Meeus/Jones/Butcher algorithm."""
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return date(year, month, day)


def good_friday(year: int) -> date:
    """Friday before Easter Sunday."""
    return easter_sunday(year) - timedelta(days=2)


def third_friday(year: int, month: int) -> date:
    """Third Friday of a month (standard monthly option expiration)."""
    return nth_weekday_of_month(year, month, FRIDAY, 3)


def iter_months(start_year: int, start_month: int, end_year: int, end_month: int):
    """Yield ``(year, month)`` pairs from start through end inclusive."""
    year, month = start_year, start_month
    while (year, month) <= (end_year, end_month):
        yield year, month
        if month == 12:
            year, month = year + 1, 1
        else:
            month += 1
