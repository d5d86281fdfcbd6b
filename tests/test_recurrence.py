"""Tests for annual recurrence."""

from datetime import datetime, timezone

import pytest

from contact_reminders.recurrence import YEARLY, next_annual_occurrence, parse_repeater

NOW = datetime(2022, 10, 5)


def test_future_anniversary_is_unchanged():
    anniversary = datetime(2022, 10, 10)
    assert next_annual_occurrence(anniversary, NOW) == anniversary


def test_anniversary_equal_to_now_is_unchanged():
    assert next_annual_occurrence(NOW, NOW) == NOW


def test_far_future_anniversary_is_unchanged():
    anniversary = datetime(2030, 1, 1)
    assert next_annual_occurrence(anniversary, NOW) == anniversary


def test_passed_this_year_moves_to_next_year():
    assert next_annual_occurrence(datetime(1990, 10, 1), NOW) == datetime(2023, 10, 1)


def test_anchors_to_reference_year_not_original_year():
    assert next_annual_occurrence(datetime(2000, 10, 10), NOW) == datetime(2023, 10, 10)


def test_past_anniversary_later_this_month_still_moves_to_next_year():
    # Past dates always land in the year after now, even when the month/day
    # is still ahead this year.
    assert next_annual_occurrence(datetime(1990, 10, 10), NOW) == datetime(2023, 10, 10)


def test_preserves_time_of_day():
    anniversary = datetime(1985, 3, 15, 8, 45, 12, 500)
    result = next_annual_occurrence(anniversary, NOW)
    assert result == datetime(2023, 3, 15, 8, 45, 12, 500)


def test_preserves_timezone():
    now = datetime(2022, 10, 5, tzinfo=timezone.utc)
    anniversary = datetime(1985, 3, 15, 12, tzinfo=timezone.utc)
    result = next_annual_occurrence(anniversary, now)
    assert result == datetime(2023, 3, 15, 12, tzinfo=timezone.utc)
    assert result.tzinfo is timezone.utc


def test_leap_day_rolls_forward_to_march_first():
    # 2022 + 1 = 2023 is not a leap year
    result = next_annual_occurrence(datetime(2000, 2, 29, 7, 0), NOW)
    assert result == datetime(2023, 3, 1, 7, 0)


def test_leap_day_kept_in_leap_year():
    now = datetime(2023, 6, 1)
    assert next_annual_occurrence(datetime(2000, 2, 29), now) == datetime(2024, 2, 29)


@pytest.mark.parametrize(
    "anniversary",
    [datetime(1900, 1, 1), datetime(1999, 12, 31, 23, 59), datetime(2022, 10, 4, 23, 59)],
)
def test_past_dates_land_in_next_year(anniversary):
    result = next_annual_occurrence(anniversary, NOW)
    assert result.year == NOW.year + 1
    assert (result.month, result.day, result.hour, result.minute) == (
        anniversary.month,
        anniversary.day,
        anniversary.hour,
        anniversary.minute,
    )


def test_rejects_dates_without_time():
    from datetime import date

    with pytest.raises(AssertionError):
        next_annual_occurrence(date(1990, 1, 1), NOW)


@pytest.mark.parametrize(
    "value,expected",
    [
        ("+1y", "+1y"),
        ("1y", "+1y"),
        ("every 1 year", "+1y"),
        ("every year", "+1y"),
        ("every 2 weeks", "+2w"),
        ("3 days", "+3d"),
        ("Every 6 Months", "+6m"),
    ],
)
def test_parse_repeater(value, expected):
    assert parse_repeater(value) == expected


@pytest.mark.parametrize("value", ["", "yearly-ish", "every 0 years", "+1h", "every"])
def test_parse_repeater_invalid(value):
    with pytest.raises(ValueError):
        parse_repeater(value)


def test_yearly_constant():
    assert parse_repeater("every 1 year") == YEARLY
