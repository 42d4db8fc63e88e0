"""Print monthly option expiration dates grouped by year.

Example:
    python scripts/print_expirations.py --start-year 2022 --end-year 2026
"""

from __future__ import annotations

import argparse
import logging

from options_expiry.cli import group_by_year
from options_expiry.schedule import CalendarError, build_expiry_table, get_monthly_option_expiration_dates

LOGGER = logging.getLogger(__name__)


def main() -> int:
    ap = argparse.ArgumentParser(description="Monthly option expiration dates grouped by year.")
    ap.add_argument("--start-year", type=int, default=2022, help="Start year (inclusive)")
    ap.add_argument("--end-year", type=int, default=2026, help="End year (inclusive)")
    ap.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(levelname)s %(message)s")

    try:
        dates = get_monthly_option_expiration_dates(args.start_year, args.end_year)
    except CalendarError as e:
        LOGGER.error("%s", e)
        return 2

    print(f"Monthly Option Expiration Dates ({args.start_year}-{args.end_year}):")
    for year, year_dates in group_by_year(dates).items():
        print(f"\n{year}:")
        for d in year_dates:
            print(d)

    shifted = build_expiry_table(args.start_year, args.end_year)
    shifted = shifted[shifted["shifted"]]
    for row in shifted.itertuples(index=False):
        LOGGER.info("Third Friday %s is a holiday; expiration moved to %s", row.third_friday, row.expiration_date)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
