"""Tests for utility modules."""

import pytest
from datetime import date, datetime

import pandas as pd
import pytz
from dateutil.easter import easter as dateutil_easter

from options_expiry.utils.date_rules import (
    FRIDAY,
    MONDAY,
    THURSDAY,
    easter_sunday,
    good_friday,
    iter_months,
    last_weekday_of_month,
    nth_weekday_of_month,
    third_friday,
)
from options_expiry.utils.tables import save_table
from options_expiry.utils.timezone import (
    EASTERN_TZ,
    localize_to_eastern,
    parse_iso_date,
    to_exchange_date,
)


class TestDateRules:
    """Tests for weekday-ordinal and Easter helpers."""

    def test_nth_weekday_of_month(self):
        assert nth_weekday_of_month(2024, 1, MONDAY, 3) == date(2024, 1, 15)  # MLK Day
        assert nth_weekday_of_month(2024, 9, MONDAY, 1) == date(2024, 9, 2)  # Labor Day
        assert nth_weekday_of_month(2024, 11, THURSDAY, 4) == date(2024, 11, 28)  # Thanksgiving

    def test_nth_weekday_on_first_of_month(self):
        """The 1st itself counts when it matches."""
        assert nth_weekday_of_month(2024, 1, MONDAY, 1) == date(2024, 1, 1)

    def test_nth_weekday_invalid_ordinal(self):
        with pytest.raises(ValueError):
            nth_weekday_of_month(2024, 1, MONDAY, 0)
        with pytest.raises(ValueError):
            nth_weekday_of_month(2024, 2, MONDAY, 5)

    def test_last_weekday_of_month(self):
        assert last_weekday_of_month(2024, 5, MONDAY) == date(2024, 5, 27)  # Memorial Day
        assert last_weekday_of_month(2021, 5, MONDAY) == date(2021, 5, 31)  # last day is a Monday

    @pytest.mark.parametrize(
        "year,expected",
        [
            (2000, date(2000, 4, 23)),
            (2008, date(2008, 3, 23)),
            (2011, date(2011, 4, 24)),
            (2019, date(2019, 4, 21)),
            (2024, date(2024, 3, 31)),
            (2038, date(2038, 4, 25)),
        ],
    )
    def test_easter_sunday(self, year, expected):
        assert easter_sunday(year) == expected

    @pytest.mark.parametrize("year", range(2000, 2051))
    def test_easter_sunday_matches_dateutil(self, year):
        """Every supported year agrees with dateutil's Western Easter."""
        assert easter_sunday(year) == dateutil_easter(year)

    def test_good_friday(self):
        assert good_friday(2024) == date(2024, 3, 29)
        assert good_friday(2024).weekday() == FRIDAY

    def test_third_friday(self):
        assert third_friday(2024, 1) == date(2024, 1, 19)
        assert third_friday(2021, 6) == date(2021, 6, 18)

    def test_iter_months(self):
        months = list(iter_months(2023, 11, 2024, 2))
        assert months == [(2023, 11), (2023, 12), (2024, 1), (2024, 2)]
        assert len(list(iter_months(2000, 1, 2050, 12))) == 612


class TestTimezone:
    """Tests for exchange-date coercion."""

    def test_plain_date(self):
        assert to_exchange_date(date(2024, 1, 1)) == date(2024, 1, 1)

    def test_naive_datetime_taken_at_face_value(self):
        assert to_exchange_date(datetime(2024, 1, 1, 23, 30)) == date(2024, 1, 1)

    def test_aware_datetime_converted_to_eastern(self):
        utc_dt = pytz.UTC.localize(datetime(2024, 1, 2, 3, 0))
        assert to_exchange_date(utc_dt) == date(2024, 1, 1)
        assert to_exchange_date(pd.Timestamp("2024-07-05 02:00", tz="UTC")) == date(2024, 7, 4)

    def test_iso_string(self):
        assert to_exchange_date("2024-06-19") == date(2024, 6, 19)
        assert parse_iso_date("2024-06-19") == date(2024, 6, 19)

    @pytest.mark.parametrize("value", ["2024-1-1", "2024-06-9", " 2024-06-19 ", "2024-06-19T00:00"])
    def test_iso_string_must_be_strict(self, value):
        """Unpadded fields and surrounding text are rejected."""
        with pytest.raises(ValueError):
            parse_iso_date(value)

    def test_invalid_values(self):
        with pytest.raises(ValueError):
            to_exchange_date("2024-02-30")
        with pytest.raises(ValueError):
            to_exchange_date(pd.NaT)
        with pytest.raises(TypeError):
            to_exchange_date(20240101)

    def test_localize_to_eastern(self):
        """Naive values are localized, aware values converted."""
        localized = localize_to_eastern(datetime(2024, 1, 15, 9, 30))
        assert localized.tzinfo.zone == EASTERN_TZ.zone

        ts = localize_to_eastern(pd.Timestamp("2024-01-15 14:30", tz="UTC"))
        assert ts.hour == 9


class TestSaveTable:
    """Tests for table persistence."""

    def test_save_csv(self, tmp_path):
        df = pd.DataFrame({"date": ["2024-01-19"], "shifted": [False]})
        out = save_table(df, tmp_path / "nested" / "table.csv")
        assert out.exists()
        assert len(pd.read_csv(out)) == 1

    def test_save_parquet(self, tmp_path):
        pytest.importorskip("pyarrow")
        df = pd.DataFrame({"year": [2024], "month": [1]})
        out = save_table(df, tmp_path / "table.parquet")
        assert pd.read_parquet(out)["year"].tolist() == [2024]

    def test_unsupported_suffix(self, tmp_path):
        with pytest.raises(ValueError, match="Unsupported table format"):
            save_table(pd.DataFrame(), tmp_path / "table.xlsx")


class TestPublicExports:
    """Tests for the utils package surface."""

    def test_all_names_resolve(self):
        import options_expiry.utils as utils

        for name in utils.__all__:
            assert hasattr(utils, name), name
        assert set(utils.__all__) >= {"EASTERN_TZ", "to_exchange_date", "save_table"}
