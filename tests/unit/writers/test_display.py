"""Unit tests for display formatting."""

import datetime as dt
from decimal import Decimal

import pytest

from timeledger.aggregators.week_grouper import WeekGroup
from timeledger.models.settings import WorkspaceSettings, parse_locale
from timeledger.writers.display import (
    day_label,
    format_clock_duration,
    format_currency,
    format_hours_clock,
    week_label,
)


class TestDurations:
    """Test cases for clock duration formatting."""

    @pytest.mark.parametrize(
        "minutes,expected",
        [(0, "00:00:00"), (45, "00:45:00"), (90, "01:30:00"), (1500, "25:00:00")],
    )
    def test_format_clock_duration(self, minutes, expected):
        """Test minutes rendered as HH:MM:00."""
        assert format_clock_duration(minutes) == expected

    def test_format_hours_clock(self):
        """Test decimal hours rendered as HH:MM:00."""
        assert format_hours_clock(Decimal("2.75")) == "02:45:00"
        assert format_hours_clock(Decimal("0.50")) == "00:30:00"


class TestFeedLabels:
    """Test cases for week and day headings."""

    @pytest.fixture
    def week(self):
        """Week of Monday 2024-04-29."""
        return WeekGroup(start=dt.date(2024, 4, 29), end=dt.date(2024, 5, 5))

    def test_this_week(self, week):
        """Test the heading of the current week."""
        assert week_label(week, today=dt.date(2024, 5, 2)) == "This week"

    def test_past_week(self, week):
        """Test the date range heading of another week."""
        assert week_label(week, today=dt.date(2024, 6, 1)) == "Apr 29 - May 5"

    @pytest.mark.parametrize(
        "day,expected",
        [
            (dt.date(2024, 5, 3), "Today"),
            (dt.date(2024, 5, 2), "Yesterday"),
            (dt.date(2024, 5, 1), "Wed, May 1"),
        ],
    )
    def test_day_label(self, day, expected):
        """Test day headings relative to 2024-05-03."""
        assert day_label(day, today=dt.date(2024, 5, 3)) == expected


class TestCurrency:
    """Test cases for currency formatting."""

    def test_default_settings(self):
        """Test US dollar formatting."""
        assert format_currency(Decimal("1234.5"), WorkspaceSettings()) == "$1,234.50"

    def test_euro_in_german_locale(self):
        """Test that the locale controls separators and symbol position."""
        settings = WorkspaceSettings(currency="EUR", currency_locale="de-DE")
        result = format_currency(Decimal("1234.5"), settings)
        assert result.startswith("1.234,50")
        assert "€" in result

    def test_parse_locale_accepts_both_separators(self):
        """Test BCP 47 and POSIX style tags."""
        assert str(parse_locale("fr-FR")) == "fr_FR"
        assert str(parse_locale("fr_FR")) == "fr_FR"

    def test_unknown_locale(self):
        """Test that unknown locales raise ValueError."""
        with pytest.raises(ValueError, match="Unknown locale"):
            parse_locale("zz-ZZ")
