"""Market business-day calendar.

Business days are Mon-Fri excluding the generated holiday set, built with a
pandas custom business-day frequency. The calendar is bound to a year range;
lookups that would leave that range raise ``YearOutOfRangeError``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta

import pandas as pd

from ..utils.timezone import DateLike
from .holiday_calendar import coerce_date, generate_holidays
from .year_range import (
    EARLIEST_SUPPORTED_YEAR,
    LATEST_SUPPORTED_YEAR,
    YearOutOfRangeError,
    validate_year_range,
)


@dataclass
class MarketCalendar:
    """Business-day calendar over ``[start_year, end_year]``."""

    start_year: int = EARLIEST_SUPPORTED_YEAR
    end_year: int = LATEST_SUPPORTED_YEAR
    holidays: frozenset[date] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        validate_year_range(self.start_year, self.end_year)
        self.holidays = frozenset(
            date.fromisoformat(d) for d in generate_holidays(self.start_year, self.end_year)
        )
        self._freq = pd.offsets.CustomBusinessDay(holidays=sorted(self.holidays))

    def _check(self, value: DateLike) -> date:
        d = coerce_date(value)
        if not self.start_year <= d.year <= self.end_year:
            raise YearOutOfRangeError(
                f"{d} is outside the calendar range {self.start_year}-{self.end_year}"
            )
        return d

    def is_business_day(self, check_date: DateLike) -> bool:
        d = self._check(check_date)
        return d.weekday() < 5 and d not in self.holidays

    def next_business_day(self, current_date: DateLike) -> date:
        d = self._check(current_date) + timedelta(days=1)
        while not self.is_business_day(d):
            d += timedelta(days=1)
        return d

    def prev_business_day(self, current_date: DateLike) -> date:
        d = self._check(current_date) - timedelta(days=1)
        while not self.is_business_day(d):
            d -= timedelta(days=1)
        return d

    def add_business_days(self, current_date: DateLike, offset: int) -> date:
        """Add (or subtract) business days from a date.

        Offset of 0 returns the input date. Positive offsets move forward
        to the next business days; negative offsets move backward.
        """
        d = self._check(current_date)
        if offset == 0:
            return d

        step = 1 if offset > 0 else -1
        for _ in range(abs(int(offset))):
            d = self.next_business_day(d) if step > 0 else self.prev_business_day(d)
        return d

    def get_business_days(self, start_date: DateLike, end_date: DateLike) -> pd.DatetimeIndex:
        start = self._check(start_date)
        end = self._check(end_date)
        if start > end:
            start, end = end, start
        return pd.date_range(start=start, end=end, freq=self._freq)

    def business_days_between(
        self,
        start_date: DateLike,
        end_date: DateLike,
        include_start: bool = True,
        include_end: bool = True,
    ) -> int:
        start = self._check(start_date)
        end = self._check(end_date)
        bdays = set(self.get_business_days(start, end).date)

        count = len(bdays)
        if not include_start and start in bdays:
            count -= 1
        if not include_end and end in bdays:
            count -= 1

        return max(count, 0)

    def days_to_expiry(self, as_of: DateLike, expiry: DateLike) -> int:
        """Calculate business days to expiry.

        Excludes start day, includes expiry day.
        """
        as_of_date = self._check(as_of)
        expiry_date = self._check(expiry)
        if as_of_date >= expiry_date:
            return 0
        return self.business_days_between(as_of_date, expiry_date, include_start=False, include_end=True)
