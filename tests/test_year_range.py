"""Tests for year range validation."""

import pytest

from options_expiry.schedule.year_range import (
    CalendarError,
    InvalidInputError,
    InvertedRangeError,
    YearOutOfRangeError,
    validate_year,
    validate_year_range,
)


class TestValidateYear:
    """Tests for single-year validation."""

    @pytest.mark.parametrize("year", [2000, 2024, 2050])
    def test_supported_years(self, year):
        """Boundary and interior years pass."""
        assert validate_year(year) is None

    @pytest.mark.parametrize("year", [1999, 2051, 0, -2024])
    def test_out_of_range(self, year):
        """Years outside 2000-2050 carry the literal message."""
        with pytest.raises(YearOutOfRangeError, match="^Holiday data is only available between 2000 and 2050$"):
            validate_year(year)

    @pytest.mark.parametrize("year", [2024.0, 2024.5, "2024", None, True])
    def test_non_integer(self, year):
        """Non-integers (including bools) are invalid input."""
        with pytest.raises(InvalidInputError):
            validate_year(year)


class TestValidateYearRange:
    """Tests for range validation."""

    def test_valid_range(self):
        assert validate_year_range(2000, 2050) is None
        assert validate_year_range(2024, 2024) is None

    def test_inverted_range(self):
        """Start after end."""
        with pytest.raises(InvertedRangeError, match="^Start year must be less than or equal to end year$"):
            validate_year_range(2025, 2024)

    def test_out_of_range_checked_before_inversion(self):
        """An out-of-range year wins over an inverted range."""
        with pytest.raises(YearOutOfRangeError):
            validate_year_range(2051, 2000)

    def test_error_hierarchy(self):
        """All errors share a ValueError base; invalid input is also a TypeError."""
        assert issubclass(YearOutOfRangeError, CalendarError)
        assert issubclass(InvertedRangeError, CalendarError)
        assert issubclass(CalendarError, ValueError)
        assert issubclass(InvalidInputError, TypeError)
