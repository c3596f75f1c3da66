"""Tests for date parsing utilities."""

from datetime import date

import pytest

from nxerp.utils.date_parser import parse_date

TODAY = date(2026, 3, 1)


class TestParseDate:
    """Tests for parse_date."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("2026-02-19", date(2026, 2, 19)),
            ("19/02/2026", date(2026, 2, 19)),
            ("05/02/2026", date(2026, 2, 5)),
            ("19 Feb 2026", date(2026, 2, 19)),
            ("Feb 19, 2026", date(2026, 2, 19)),
            ("  2026-01-05  ", date(2026, 1, 5)),
        ],
    )
    def test_absolute_dates(self, text, expected):
        """Test absolute date formats."""
        assert parse_date(text, today=TODAY) == expected

    def test_iso_dates_are_not_day_first(self):
        """Test that year-first input keeps month before day."""
        assert parse_date("2026-02-05") == date(2026, 2, 5)

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("today", date(2026, 3, 1)),
            ("Yesterday", date(2026, 2, 28)),
            ("TOMORROW", date(2026, 3, 2)),
        ],
    )
    def test_relative_dates(self, text, expected):
        """Test relative keywords against a fixed reference date."""
        assert parse_date(text, today=TODAY) == expected

    def test_today_defaults_to_current_date(self):
        """Test that the reference date defaults to today."""
        assert parse_date("today") == date.today()

    @pytest.mark.parametrize("text", ["", "   ", "not a date", "2026-13-45"])
    def test_invalid_dates(self, text):
        """Test that invalid input raises ValueError."""
        with pytest.raises(ValueError):
            parse_date(text, today=TODAY)
