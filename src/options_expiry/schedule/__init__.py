"""Holiday calendar, expiration schedule and business-day calendar."""

from .year_range import (
    EARLIEST_SUPPORTED_YEAR,
    LATEST_SUPPORTED_YEAR,
    CalendarError,
    InvalidInputError,
    YearOutOfRangeError,
    InvertedRangeError,
    validate_year,
    validate_year_range,
)
from .holiday_calendar import (
    ANNUAL_HOLIDAYS,
    SPECIAL_CLOSURES,
    HolidayOccurrence,
    holiday_occurrences,
    generate_holidays,
    is_market_holiday,
    build_holiday_table,
)
from .expiry_schedule import (
    monthly_expiration,
    get_monthly_option_expiration_dates,
    get_option_expiration_dates_between,
    is_expiration_day,
    next_expiration,
    build_expiry_table,
)
from .trading_calendar import MarketCalendar

__all__ = [
    "EARLIEST_SUPPORTED_YEAR",
    "LATEST_SUPPORTED_YEAR",
    "CalendarError",
    "InvalidInputError",
    "YearOutOfRangeError",
    "InvertedRangeError",
    "validate_year",
    "validate_year_range",
    "ANNUAL_HOLIDAYS",
    "SPECIAL_CLOSURES",
    "HolidayOccurrence",
    "holiday_occurrences",
    "generate_holidays",
    "is_market_holiday",
    "build_holiday_table",
    "monthly_expiration",
    "get_monthly_option_expiration_dates",
    "get_option_expiration_dates_between",
    "is_expiration_day",
    "next_expiration",
    "build_expiry_table",
    "MarketCalendar",
]
