"""
Tests for the monthly PV cycle calendar.
"""
from datetime import date, datetime, timezone as dt_timezone
from zoneinfo import ZoneInfo

import pytest
from django.conf import settings
from django.test import override_settings

from apps.pv import schedule


def utc(*args):
    return datetime(*args, tzinfo=dt_timezone.utc)


def test_monthly_interval_constant():
    assert schedule.MONTHLY_INTERVAL_SECONDS == 2592000


def test_period_for_formats_year_and_month():
    assert schedule.period_for(date(2026, 3, 9)) == '2026-03'


@pytest.mark.parametrize('value', ['2026-13', '2026-00', 'march', '', None, '2026-1-1'])
def test_parse_period_rejects_malformed_values(value):
    with pytest.raises(ValueError):
        schedule.parse_period(value)


def test_month_end_anchor_is_last_day_at_2359():
    assert schedule.month_end_anchor(2026, 2) == utc(2026, 2, 28, 23, 59)
    assert schedule.month_end_anchor(2024, 2) == utc(2024, 2, 29, 23, 59)
    assert schedule.month_end_anchor(2026, 12) == utc(2026, 12, 31, 23, 59)


def test_month_end_anchor_uses_configured_time():
    policy = {**settings.PV_DISCOUNT, 'RESET_HOUR': 0, 'RESET_MINUTE': 5}
    with override_settings(PV_DISCOUNT=policy):
        assert schedule.month_end_anchor(2026, 4) == utc(2026, 4, 30, 0, 5)


@override_settings(TIME_ZONE='Europe/Paris')
def test_month_end_anchor_follows_local_time_zone():
    anchor = schedule.month_end_anchor(2026, 1)
    assert anchor == datetime(2026, 1, 31, 23, 59, tzinfo=ZoneInfo('Europe/Paris'))
    assert anchor == utc(2026, 1, 31, 22, 59)


def test_next_reset_at_mid_month():
    assert schedule.next_reset_at(utc(2026, 2, 10, 12, 0)) == utc(2026, 2, 28, 23, 59)


def test_next_reset_at_after_anchor_rolls_over():
    assert schedule.next_reset_at(utc(2026, 2, 28, 23, 59, 30)) == utc(2026, 3, 31, 23, 59)
    assert schedule.next_reset_at(utc(2026, 12, 31, 23, 59, 1)) == utc(2027, 1, 31, 23, 59)


@pytest.mark.parametrize('now, expected', [
    (utc(2026, 2, 15, 8, 0), '2026-01'),
    (utc(2026, 2, 28, 23, 58), '2026-01'),
    (utc(2026, 2, 28, 23, 59), '2026-02'),
    (utc(2026, 3, 1, 0, 0), '2026-02'),
    (utc(2026, 1, 10, 0, 0), '2025-12'),
])
def test_due_period(now, expected):
    assert schedule.due_period(now) == expected


def test_expiry_date_is_last_day_of_month():
    assert schedule.expiry_date(date(2026, 2, 3)) == date(2026, 2, 28)
    assert schedule.expiry_date(date(2024, 2, 3)) == date(2024, 2, 29)
    assert schedule.expiry_date(date(2026, 7, 31)) == date(2026, 7, 31)
