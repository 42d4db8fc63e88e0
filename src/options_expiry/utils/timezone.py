"""Date coercion in exchange time.

The encoded calendar is the NYSE/Cboe US equity calendar, so the *exchange
date* of any timestamp is its calendar date in US/Eastern.

- ``datetime.date`` and naive datetimes are taken at face value (their own
  calendar date, no conversion).
- Timezone-aware datetimes and ``pd.Timestamp`` values are converted to
  US/Eastern first, then truncated to a date.
- Strings must be ISO ``YYYY-MM-DD``.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Union

import pandas as pd
import pytz

EASTERN_TZ = pytz.timezone("US/Eastern")

ISO_DATE_FORMAT = "%Y-%m-%d"

DateLike = Union[date, datetime, pd.Timestamp, str]


def localize_to_eastern(dt: Union[datetime, pd.Timestamp]) -> Union[datetime, pd.Timestamp]:
    """Localize a naive datetime to US/Eastern, or convert an aware one.

    Args:
        dt: Naive or aware datetime / Timestamp

    Returns:
        Datetime in US/Eastern
    """
    if isinstance(dt, pd.Timestamp):
        if dt.tz is None:
            return dt.tz_localize(EASTERN_TZ)
        return dt.tz_convert(EASTERN_TZ)

    if dt.tzinfo is None:
        return EASTERN_TZ.localize(dt)
    return dt.astimezone(EASTERN_TZ)


def parse_iso_date(value: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` string.

    Raises:
        ValueError: If the text is not a well-formed calendar date
    """
    if len(value) != 10:
        raise ValueError(f"Expected YYYY-MM-DD, got {value!r}")
    return datetime.strptime(value, ISO_DATE_FORMAT).date()


def to_exchange_date(value: DateLike) -> date:
    """Coerce a date-like value to its exchange (US/Eastern) calendar date.

    Raises:
        TypeError: If the value is not date-like
        ValueError: If the value is a missing timestamp or unparsable text
    """
    if isinstance(value, str):
        return parse_iso_date(value)

    if value is pd.NaT:
        raise ValueError("Missing timestamp (NaT)")

    if isinstance(value, datetime):
        # Covers pd.Timestamp too
        if value.tzinfo is None:
            return value.date()
        return localize_to_eastern(value).date()

    if isinstance(value, date):
        return value

    raise TypeError(f"Expected a date-like value, got {type(value).__name__}")


def to_iso(d: date) -> str:
    """Format a date as ISO ``YYYY-MM-DD``."""
    return d.isoformat()
