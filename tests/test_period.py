"""Tests for reporting period calculation."""

from datetime import datetime, timedelta

import pytest

from salonledger.domain.entities import PeriodUnit
from salonledger.domain.period import get_period_range, period_label

ONE_MS = timedelta(milliseconds=1)


def test_day_range_covers_whole_day(now):
    period = get_period_range("day", 0, now)

    assert period.start == datetime(2026, 10, 19)
    assert period.end == datetime(2026, 10, 19, 23, 59, 59, 999000)


def test_day_offset_moves_by_days(now):
    period = get_period_range(PeriodUnit.DAY, -3, now)

    assert period.start == datetime(2026, 10, 16)
    assert period.end.date() == period.start.date()


def test_week_starts_on_monday(now):
    # 2026-10-22 is a Thursday
    period = get_period_range("week", 0, datetime(2026, 10, 22, 9, 0))

    assert period.start == datetime(2026, 10, 19)
    assert period.end == datetime(2026, 10, 25, 23, 59, 59, 999000)


def test_week_on_sunday_belongs_to_previous_monday():
    period = get_period_range("week", 0, datetime(2026, 10, 25, 20, 0))

    assert period.start == datetime(2026, 10, 19)
    assert period.start.weekday() == 0


def test_week_offset_moves_by_seven_days(now):
    current = get_period_range("week", 0, now)
    previous = get_period_range("week", -1, now)

    assert current.start - previous.start == timedelta(days=7)


def test_month_range(now):
    period = get_period_range("month", 0, now)

    assert period.start == datetime(2026, 10, 1)
    assert period.end == datetime(2026, 10, 31, 23, 59, 59, 999000)


def test_month_end_handles_february_and_leap_years():
    assert get_period_range("month", 0, datetime(2026, 2, 10)).end.day == 28
    assert get_period_range("month", 0, datetime(2028, 2, 10)).end.day == 29


def test_month_offset_crosses_year_boundary(now):
    period = get_period_range("month", 3, now)

    assert period.start == datetime(2027, 1, 1)
    assert period.end.date() == datetime(2027, 1, 31).date()


def test_month_offset_from_month_end():
    # Day 31 must not overflow into the following month
    period = get_period_range("month", 1, datetime(2026, 1, 31, 12, 0))

    assert period.start == datetime(2026, 2, 1)
    assert period.end.day == 28


@pytest.mark.parametrize("unit", ["day", "week", "month"])
@pytest.mark.parametrize("offset", [-14, -1, 0, 1, 5])
def test_consecutive_ranges_are_contiguous(now, unit, offset):
    current = get_period_range(unit, offset, now)
    following = get_period_range(unit, offset + 1, now)

    assert current.end >= current.start
    assert current.end + ONE_MS == following.start


def test_consecutive_weeks_have_seven_day_stride(now):
    for offset in range(-5, 5):
        period = get_period_range("week", offset, now)
        assert period.end + ONE_MS - period.start == timedelta(days=7)


def test_invalid_unit_raises(now):
    with pytest.raises(ValueError):
        get_period_range("year", 0, now)


def test_default_now_is_current_time():
    period = get_period_range("day")

    assert period.contains(datetime.now())


def test_period_labels(now):
    assert period_label("day", get_period_range("day", 0, now)) == "lunes 19 octubre"
    assert period_label("week", get_period_range("week", 0, now)) == "19 - 25 oct"
    assert period_label("month", get_period_range("month", 0, now)) == "octubre 2026"


def test_week_label_spanning_months():
    period = get_period_range("week", 0, datetime(2026, 10, 29))

    assert period_label("week", period) == "26 - 1 nov"


@pytest.mark.parametrize("unit", ["day", "week", "month"])
def test_last_sub_millisecond_belongs_to_exactly_one_period(now, unit):
    moment = datetime(2026, 10, 31, 23, 59, 59, 999500)
    current = get_period_range(unit, 0, moment)
    following = get_period_range(unit, 1, moment)

    assert current.contains(moment)
    assert not following.contains(moment)
    assert following.contains(current.next_start)
