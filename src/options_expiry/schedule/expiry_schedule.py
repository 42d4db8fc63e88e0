"""Monthly option expiration schedule.

Standard monthly equity options expire on the third Friday of the month. When
that Friday is a market holiday, expiration moves to the Thursday before it.

Only the third Friday is checked. The shifted Thursday is never itself checked
against the holiday set, even if it is also a holiday.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta

import pandas as pd

from ..utils.date_rules import iter_months, third_friday
from ..utils.timezone import DateLike, to_iso
from .holiday_calendar import coerce_date, is_market_holiday
from .year_range import (
    LATEST_SUPPORTED_YEAR,
    InvertedRangeError,
    YearOutOfRangeError,
    validate_year,
    validate_year_range,
)

LOGGER = logging.getLogger(__name__)

INVERTED_DATES_MESSAGE = "Start date must be on or before end date"


def _resolve(friday: date) -> date:
    if is_market_holiday(friday):
        return friday - timedelta(days=1)
    return friday


def monthly_expiration(year: int, month: int) -> date:
    """Expiration date for one month: third Friday, or Thursday if it is a holiday."""
    validate_year(year)
    return _resolve(third_friday(year, month))


def get_monthly_option_expiration_dates(start_year: int, end_year: int) -> list[str]:
    """Get monthly option expiration dates for the specified years.

    Args:
        start_year: Start year (inclusive)
        end_year: End year (inclusive)

    Returns:
        One ``YYYY-MM-DD`` date per month, chronological

    Raises:
        InvalidInputError: If a year is not an integer
        YearOutOfRangeError: If a year is outside 2000-2050
        InvertedRangeError: If ``start_year > end_year``
    """
    validate_year_range(start_year, end_year)

    return [
        to_iso(_resolve(third_friday(year, month)))
        for year, month in iter_months(start_year, 1, end_year, 12)
    ]


def get_option_expiration_dates_between(start_date: DateLike, end_date: DateLike) -> list[str]:
    """Get monthly expirations whose third Friday falls inside a date window.

    The window test is made on the third Friday, so a window ending on a
    holiday Friday still yields the Thursday before it.
    """
    start = coerce_date(start_date)
    end = coerce_date(end_date)
    validate_year(start.year)
    validate_year(end.year)
    if start > end:
        raise InvertedRangeError(INVERTED_DATES_MESSAGE)

    expirations = []
    for year, month in iter_months(start.year, start.month, end.year, end.month):
        friday = third_friday(year, month)
        if start <= friday <= end:
            expirations.append(to_iso(_resolve(friday)))
    return expirations


def is_expiration_day(value: DateLike) -> bool:
    """Check if a date is its month's monthly expiration."""
    check_date = coerce_date(value)
    return monthly_expiration(check_date.year, check_date.month) == check_date


def next_expiration(value: DateLike) -> date:
    """First monthly expiration on or after a date.

    Raises:
        YearOutOfRangeError: If the next expiration falls after 2050
    """
    as_of = coerce_date(value)
    validate_year(as_of.year)

    expiry = monthly_expiration(as_of.year, as_of.month)
    if expiry >= as_of:
        return expiry

    if as_of.month == 12:
        if as_of.year == LATEST_SUPPORTED_YEAR:
            raise YearOutOfRangeError(f"No expiration on or after {as_of} within supported range")
        return monthly_expiration(as_of.year + 1, 1)
    return monthly_expiration(as_of.year, as_of.month + 1)


def build_expiry_table(start_year: int, end_year: int) -> pd.DataFrame:
    """Build expiry table (one row per month)."""
    validate_year_range(start_year, end_year)

    records = []
    for year, month in iter_months(start_year, 1, end_year, 12):
        friday = third_friday(year, month)
        expiry_date = _resolve(friday)
        records.append(
            {
                "year": year,
                "month": month,
                "third_friday": friday,
                "expiration_date": expiry_date,
                "shifted": expiry_date != friday,
            }
        )

    df = pd.DataFrame(records)
    LOGGER.debug("Built expiry table %s-%s: %d months", start_year, end_year, len(df))
    return df
