"""Monthly equity option expiration calendar (US market holidays, 2000-2050).

Usage:
    options-expiry expirations --start-year 2024 --end-year 2024
    options-expiry holidays --start-year 2024 --end-year 2024 --names
    options-expiry check 2021-06-18
"""

from .schedule import (
    CalendarError,
    InvalidInputError,
    YearOutOfRangeError,
    InvertedRangeError,
    generate_holidays,
    is_market_holiday,
    get_monthly_option_expiration_dates,
    get_option_expiration_dates_between,
    MarketCalendar,
)

__version__ = "1.0.0"

__all__ = [
    "CalendarError",
    "InvalidInputError",
    "YearOutOfRangeError",
    "InvertedRangeError",
    "generate_holidays",
    "is_market_holiday",
    "get_monthly_option_expiration_dates",
    "get_option_expiration_dates_between",
    "MarketCalendar",
]
