"""Supported year range and the errors raised at the library boundary.

Every public operation validates its inputs here before computing anything, so
malformed input never produces a partial or silently wrong calendar.
"""

from __future__ import annotations

from numbers import Integral

EARLIEST_SUPPORTED_YEAR = 2000
LATEST_SUPPORTED_YEAR = 2050

OUT_OF_RANGE_MESSAGE = (
    f"Holiday data is only available between {EARLIEST_SUPPORTED_YEAR} and {LATEST_SUPPORTED_YEAR}"
)
INVERTED_RANGE_MESSAGE = "Start year must be less than or equal to end year"


class CalendarError(ValueError):
    """Base class for errors raised by the expiration calendar."""


class InvalidInputError(CalendarError, TypeError):
    """A year is not an integer, or a date argument is not a calendar date."""


class YearOutOfRangeError(CalendarError):
    """A referenced year falls outside the supported range."""


class InvertedRangeError(CalendarError):
    """The start of a range is after its end."""


def validate_year(year: object) -> None:
    """Validate a single year.

    Raises:
        InvalidInputError: If ``year`` is not an integer (bools are rejected)
        YearOutOfRangeError: If ``year`` is outside 2000-2050
    """
    if isinstance(year, bool) or not isinstance(year, Integral):
        raise InvalidInputError(f"Year must be an integer, got {year!r}")
    if year < EARLIEST_SUPPORTED_YEAR or year > LATEST_SUPPORTED_YEAR:
        raise YearOutOfRangeError(OUT_OF_RANGE_MESSAGE)


def validate_year_range(start_year: object, end_year: object) -> None:
    """Validate an inclusive ``(start_year, end_year)`` range.

    Raises:
        InvalidInputError: If either year is not an integer
        YearOutOfRangeError: If either year is outside 2000-2050
        InvertedRangeError: If ``start_year > end_year``
    """
    validate_year(start_year)
    validate_year(end_year)
    if start_year > end_year:
        raise InvertedRangeError(INVERTED_RANGE_MESSAGE)
