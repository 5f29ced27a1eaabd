"""Tests for date and time parsing."""

import pytest
from datetime import date, datetime, time, timedelta

from salonledger.utils.date_parser import combine_date_time, parse_date, parse_time


def test_parse_absolute_date():
    """Test parsing absolute dates."""
    assert parse_date("2024-01-15") == date(2024, 1, 15)


def test_parse_relative_dates():
    today = date.today()
    assert parse_date("today") == today
    assert parse_date("hoy") == today
    assert parse_date("yesterday") == today - timedelta(days=1)
    assert parse_date("tomorrow") == today + timedelta(days=1)


def test_parse_invalid_date():
    with pytest.raises(ValueError, match="Could not parse date"):
        parse_date("not a date")


def test_parse_time():
    assert parse_time("15:30") == time(15, 30)
    assert parse_time("3:30 pm") == time(15, 30)


def test_parse_invalid_time():
    with pytest.raises(ValueError):
        parse_time("")
    with pytest.raises(ValueError):
        parse_time("half past")


def test_combine_date_time():
    assert combine_date_time("2026-10-20", "10:00") == datetime(2026, 10, 20, 10, 0)


def test_truncate_to_millis():
    from salonledger.utils.date_parser import truncate_to_millis

    assert truncate_to_millis(datetime(2026, 10, 19, 23, 59, 59, 999999)) == datetime(
        2026, 10, 19, 23, 59, 59, 999000
    )
