"""
Monthly PV cycle calendar.

A cycle is a calendar month in the server's local time zone. It closes at
its anchor, the last day of the month at ``PV_DISCOUNT['RESET_HOUR']``:
``PV_DISCOUNT['RESET_MINUTE']`` (23:59 by default). Periods are written
``YYYY-MM``.

The reset command is meant to run from cron at the anchor
(``59 23 28-31 * *``); running it more often is harmless.
"""
import calendar
from datetime import date, datetime, time

from django.conf import settings
from django.utils import timezone

# Nominal interval of the monthly job, kept for schedulers that want one
MONTHLY_INTERVAL_SECONDS = 2592000


def period_for(day):
    return f"{day.year:04d}-{day.month:02d}"


def parse_period(period):
    """``'YYYY-MM'`` -> ``(year, month)``"""
    try:
        year_text, month_text = period.split('-')
        year, month = int(year_text), int(month_text)
    except (AttributeError, ValueError):
        raise ValueError(f"Invalid period {period!r}, expected YYYY-MM")
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid period {period!r}, month out of range")
    return year, month


def last_day_of_month(day):
    return date(day.year, day.month, calendar.monthrange(day.year, day.month)[1])


def _shift_month(year, month, delta):
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def month_end_anchor(year, month):
    """Aware datetime at which the cycle of ``year``/``month`` closes"""
    policy = settings.PV_DISCOUNT
    anchor_day = last_day_of_month(date(year, month, 1))
    naive = datetime.combine(anchor_day, time(policy.get('RESET_HOUR', 23), policy.get('RESET_MINUTE', 59)))
    return timezone.make_aware(naive, timezone.get_current_timezone())


def anchor_for_period(period):
    return month_end_anchor(*parse_period(period))


def next_reset_at(now=None):
    """The next anchor at or after ``now``"""
    now = now or timezone.now()
    local = timezone.localtime(now)
    anchor = month_end_anchor(local.year, local.month)
    if anchor >= now:
        return anchor
    return month_end_anchor(*_shift_month(local.year, local.month, 1))


def due_period(now=None):
    """The most recent period whose anchor has passed"""
    now = now or timezone.now()
    local = timezone.localtime(now)
    if month_end_anchor(local.year, local.month) <= now:
        return period_for(local)
    year, month = _shift_month(local.year, local.month, -1)
    return f"{year:04d}-{month:02d}"


def expiry_date(today=None):
    """Date on which PV accrued today expires (last day of the month)"""
    today = today or timezone.localdate()
    return last_day_of_month(today)
