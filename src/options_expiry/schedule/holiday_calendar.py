"""US equity market holiday calendar (NYSE rules, 2000-2050).

Full-day closures only. Early closes (July 3, day after Thanksgiving,
Christmas Eve) do not move monthly expirations and are not modelled.

Annual holidays
---------------
New Year's Day, MLK Day, Presidents Day, Good Friday, Memorial Day,
Juneteenth (from 2021), Independence Day, Labor Day, Thanksgiving, Christmas.

Weekend observance: a Saturday holiday closes the market the Friday before,
a Sunday holiday the Monday after.

New Year's Day quirk
--------------------
When January 1 of year Y is a Saturday the calendar lists ``Y-12-31`` (the
December 31 at the *end* of year Y), not ``(Y-1)-12-31``; see
``tests/test_holiday_calendar.py``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

import pandas as pd

from ..utils.date_rules import (
    MONDAY,
    SATURDAY,
    SUNDAY,
    THURSDAY,
    WEEKDAY_NAMES,
    good_friday,
    last_weekday_of_month,
    nth_weekday_of_month,
)
from ..utils.timezone import DateLike, to_exchange_date, to_iso
from .year_range import InvalidInputError, validate_year, validate_year_range

JUNETEENTH_FIRST_YEAR = 2021


@dataclass(frozen=True)
class HolidayOccurrence:
    """A single market closure."""

    date: date
    name: str
    special: bool = False

    @property
    def iso(self) -> str:
        return to_iso(self.date)


@dataclass(frozen=True)
class AnnualHoliday:
    """Rule producing at most one closure per year."""

    name: str
    rule: Callable[[int], Optional[date]]


@dataclass(frozen=True)
class SpecialClosure:
    """One-off closure(s) outside the annual rules."""

    year: int
    name: str
    dates: tuple[date, ...]


def _observed(holiday: date) -> date:
    """Shift a fixed-date holiday off the weekend (Sat -> Fri, Sun -> Mon)."""
    if holiday.weekday() == SATURDAY:
        return date(holiday.year, holiday.month, holiday.day - 1)
    if holiday.weekday() == SUNDAY:
        return date(holiday.year, holiday.month, holiday.day + 1)
    return holiday


def _new_years_day(year: int) -> date:
    new_years = date(year, 1, 1)
    if new_years.weekday() == SUNDAY:
        return date(year, 1, 2)
    if new_years.weekday() == SATURDAY:
        # Same-year Dec 31, see module docstring
        return date(year, 12, 31)
    return new_years


def _juneteenth(year: int) -> Optional[date]:
    if year < JUNETEENTH_FIRST_YEAR:
        return None
    return _observed(date(year, 6, 19))


ANNUAL_HOLIDAYS: tuple[AnnualHoliday, ...] = (
    AnnualHoliday("New Year's Day", _new_years_day),
    AnnualHoliday("Martin Luther King Jr. Day", lambda y: nth_weekday_of_month(y, 1, MONDAY, 3)),
    AnnualHoliday("Presidents Day", lambda y: nth_weekday_of_month(y, 2, MONDAY, 3)),
    AnnualHoliday("Good Friday", good_friday),
    AnnualHoliday("Memorial Day", lambda y: last_weekday_of_month(y, 5, MONDAY)),
    AnnualHoliday("Juneteenth", _juneteenth),
    AnnualHoliday("Independence Day", lambda y: _observed(date(y, 7, 4))),
    AnnualHoliday("Labor Day", lambda y: nth_weekday_of_month(y, 9, MONDAY, 1)),
    AnnualHoliday("Thanksgiving Day", lambda y: nth_weekday_of_month(y, 11, THURSDAY, 4)),
    AnnualHoliday("Christmas Day", lambda y: _observed(date(y, 12, 25))),
)

SPECIAL_CLOSURES: tuple[SpecialClosure, ...] = (
    SpecialClosure(
        2001,
        "September 11 attacks",
        (date(2001, 9, 11), date(2001, 9, 12), date(2001, 9, 13), date(2001, 9, 14)),
    ),
    SpecialClosure(2012, "Hurricane Sandy", (date(2012, 10, 29), date(2012, 10, 30))),
    SpecialClosure(2018, "Day of Mourning for President George H.W. Bush", (date(2018, 12, 5),)),
    SpecialClosure(2020, "COVID-19 trading floor closure", (date(2020, 3, 23),)),
)


def holiday_occurrences(start_year: int, end_year: int) -> list[HolidayOccurrence]:
    """Named market closures between two years (inclusive), sorted by date.

    Duplicates are kept; the result is not deduplicated.
    """
    validate_year_range(start_year, end_year)

    occurrences: list[HolidayOccurrence] = []
    for year in range(start_year, end_year + 1):
        for holiday in ANNUAL_HOLIDAYS:
            observed = holiday.rule(year)
            if observed is not None:
                occurrences.append(HolidayOccurrence(observed, holiday.name))

    for closure in SPECIAL_CLOSURES:
        if start_year <= closure.year <= end_year:
            occurrences.extend(HolidayOccurrence(d, closure.name, special=True) for d in closure.dates)

    occurrences.sort(key=lambda occ: occ.date)
    return occurrences


def generate_holidays(start_year: int, end_year: int) -> list[str]:
    """Generate US market holidays between the specified years.

    Args:
        start_year: Start year (inclusive)
        end_year: End year (inclusive)

    Returns:
        Holiday dates as ``YYYY-MM-DD`` strings, ascending

    Raises:
        InvalidInputError: If a year is not an integer
        YearOutOfRangeError: If a year is outside 2000-2050
        InvertedRangeError: If ``start_year > end_year``
    """
    return [occ.iso for occ in holiday_occurrences(start_year, end_year)]


def coerce_date(value: DateLike) -> date:
    """Coerce a date-like argument, raising ``InvalidInputError`` on bad input."""
    try:
        return to_exchange_date(value)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Invalid date provided: {value!r}") from e


def is_market_holiday(value: DateLike) -> bool:
    """Check whether a date is a full-day US market closure.

    The holiday set for the date's year is regenerated on every call.

    Raises:
        InvalidInputError: If ``value`` is not a well-formed date
        YearOutOfRangeError: If the date's year is outside 2000-2050
    """
    check_date = coerce_date(value)
    validate_year(check_date.year)
    return to_iso(check_date) in generate_holidays(check_date.year, check_date.year)


def build_holiday_table(start_year: int, end_year: int) -> pd.DataFrame:
    """Build holiday table (one row per closure)."""
    records = [
        {
            "date": occ.date,
            "year": occ.date.year,
            "weekday": WEEKDAY_NAMES[occ.date.weekday()],
            "name": occ.name,
            "special": occ.special,
        }
        for occ in holiday_occurrences(start_year, end_year)
    ]
    return pd.DataFrame(records, columns=["date", "year", "weekday", "name", "special"])
