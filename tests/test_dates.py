"""Tests for diario.dates pure functions."""

from datetime import date

import pytest

from diario.dates import (
    day_key,
    days_in_month,
    format_day,
    month_days,
    month_label,
    month_of,
    parse_day_key,
    parse_month,
    shift_month,
)
from diario.domain.models import Month


class TestShiftMonth:
    """Tests for shift_month."""

    def test_next_month_within_year(self) -> None:
        """Should move forward one month."""
        assert shift_month(Month("2025-03"), 1) == "2025-04"

    def test_next_month_from_december_rolls_over(self) -> None:
        """Should go from December to January of the next year."""
        assert shift_month(Month("2025-12"), 1) == "2026-01"

    def test_previous_month_from_january_rolls_back(self) -> None:
        """Should go from January to December of the previous year."""
        assert shift_month(Month("2025-01"), -1) == "2024-12"

    def test_multi_month_shift(self) -> None:
        """Should handle shifts larger than a year."""
        assert shift_month(Month("2025-06"), -18) == "2023-12"
        assert shift_month(Month("2025-06"), 7) == "2026-01"

    def test_zero_shift(self) -> None:
        """Should return the same month."""
        assert shift_month(Month("2025-06"), 0) == "2025-06"


class TestDaysInMonth:
    """Tests for days_in_month and month_days."""

    def test_february_leap_year(self) -> None:
        """Should have 29 days in February 2024."""
        assert days_in_month(Month("2024-02")) == 29

    def test_february_non_leap_year(self) -> None:
        """Should have 28 days in February 2025."""
        assert days_in_month(Month("2025-02")) == 28

    def test_century_years(self) -> None:
        """Should follow the 100/400 year rules."""
        assert days_in_month(Month("1900-02")) == 28
        assert days_in_month(Month("2000-02")) == 29

    def test_all_months_of_year(self) -> None:
        """Should correctly handle all 12 months."""
        expected = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
        for month_num in range(1, 13):
            assert days_in_month(Month(f"2025-{month_num:02d}")) == expected[month_num - 1]

    def test_month_days_are_consecutive(self) -> None:
        """Should list every day from the 1st to the last."""
        days = month_days(Month("2025-04"))

        assert days[0] == date(2025, 4, 1)
        assert days[-1] == date(2025, 4, 30)
        assert len(days) == 30


class TestParsing:
    """Tests for month and day key parsing."""

    def test_parse_month(self) -> None:
        """Should split YYYY-MM into integers."""
        assert parse_month("2024-03") == (2024, 3)

    def test_invalid_month_format_raises_valueerror(self) -> None:
        """Should raise ValueError for invalid month format."""
        with pytest.raises(ValueError):
            parse_month("invalid")

    def test_invalid_month_number_raises_valueerror(self) -> None:
        """Should raise ValueError for invalid month number."""
        with pytest.raises(ValueError):
            parse_month("2025-13")

    def test_day_key_round_trip(self) -> None:
        """Should convert a date to YYYY-MM-DD and back."""
        key = day_key(date(2024, 3, 5))

        assert key == "2024-03-05"
        assert parse_day_key(key) == date(2024, 3, 5)

    def test_invalid_day_key_raises_valueerror(self) -> None:
        """Should reject impossible dates."""
        with pytest.raises(ValueError):
            parse_day_key("2025-02-30")

    def test_month_of(self) -> None:
        """Should take the month of a date."""
        assert month_of(date(2024, 12, 31)) == "2024-12"


class TestFormatting:
    """Tests for labels and date formatting."""

    def test_month_label_is_spanish(self) -> None:
        """Should name the month in Spanish."""
        assert month_label(Month("2024-03")) == "marzo de 2024"
        assert month_label(Month("2025-12")) == "diciembre de 2025"

    def test_format_day(self) -> None:
        """Should format as DD/MM/YYYY."""
        assert format_day(date(2024, 3, 5)) == "05/03/2024"
