"""Shared utilities for the expiration calendar."""

from .date_rules import (
    FRIDAY,
    WEEKDAY_NAMES,
    nth_weekday_of_month,
    last_weekday_of_month,
    easter_sunday,
    good_friday,
    third_friday,
    iter_months,
)
from .timezone import (
    EASTERN_TZ,
    localize_to_eastern,
    parse_iso_date,
    to_exchange_date,
    to_iso,
)
from .tables import save_table

__all__ = [
    "FRIDAY",
    "WEEKDAY_NAMES",
    "nth_weekday_of_month",
    "last_weekday_of_month",
    "easter_sunday",
    "good_friday",
    "third_friday",
    "iter_months",
    "EASTERN_TZ",
    "localize_to_eastern",
    "parse_iso_date",
    "to_exchange_date",
    "to_iso",
    "save_table",
]
