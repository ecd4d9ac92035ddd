"""
Tests for the month-end PV reset.
"""
from datetime import datetime, timezone as dt_timezone
from decimal import Decimal
from unittest import mock

from django.db import DatabaseError
from django.test import TestCase

from apps.pv.exceptions import ResetPartialFailure
from apps.pv.models import PVLedger, PVResetRun
from apps.pv.services import (
    DistributorDiscountService, MonthlyResetService, PVAccrualService, PVLedgerService
)
from tests.factories import DistributorFactory, ProductFactory, create_order_with_items


def utc(*args):
    return datetime(*args, tzinfo=dt_timezone.utc)


JANUARY_ANCHOR = utc(2026, 1, 31, 23, 59)
AFTER_JANUARY = utc(2026, 2, 1, 6, 0)


class MonthlyResetTestCase(TestCase):

    def setUp(self):
        self.product = ProductFactory(pv=Decimal('50'))

    def accrue(self, user, quantity, at):
        order = create_order_with_items(user, [(self.product, quantity)])
        return PVAccrualService.accrue_for_order(order, now=at)

    def distributor_with_pv(self, quantity, at=utc(2026, 1, 15, 12, 0)):
        user = DistributorFactory()
        self.accrue(user, quantity, at)
        return user


class ResetServiceTest(MonthlyResetTestCase):

    def test_reset_zeroes_every_ledger(self):
        users = [self.distributor_with_pv(q) for q in (1, 2, 7)]

        reset_run = MonthlyResetService.run(period='2026-01', now=AFTER_JANUARY)

        self.assertEqual(reset_run.status, PVResetRun.COMPLETED)
        self.assertEqual(reset_run.users_reset, 3)
        self.assertEqual(reset_run.cutoff, JANUARY_ANCHOR)
        for user in users:
            ledger = PVLedger.objects.get(user=user)
            self.assertEqual(ledger.monthly_pv, Decimal('0'))
            self.assertEqual(ledger.reset_period, '2026-01')

    def test_default_period_is_the_month_just_ended(self):
        self.distributor_with_pv(1)

        reset_run = MonthlyResetService.run(now=AFTER_JANUARY)

        self.assertEqual(reset_run.period, '2026-01')

    def test_discount_is_zero_after_reset(self):
        user = self.distributor_with_pv(2)
        self.assertEqual(DistributorDiscountService.discount_for(user)[0], 30)

        MonthlyResetService.run(period='2026-01', now=AFTER_JANUARY)

        self.assertEqual(DistributorDiscountService.discount_for(user), (0, Decimal('0')))

    def test_pv_accrued_after_cutoff_is_carried_over(self):
        user = self.distributor_with_pv(2)
        self.accrue(user, 1, utc(2026, 2, 1, 0, 30))
        self.assertEqual(PVLedgerService.read_monthly_pv(user), Decimal('150'))

        MonthlyResetService.run(period='2026-01', now=AFTER_JANUARY)

        self.assertEqual(PVLedgerService.read_monthly_pv(user), Decimal('50'))

    def test_completed_period_is_not_reset_again(self):
        user = self.distributor_with_pv(2)
        MonthlyResetService.run(period='2026-01', now=AFTER_JANUARY)
        self.accrue(user, 1, utc(2026, 2, 3, 9, 0))

        reset_run = MonthlyResetService.run(period='2026-01', now=utc(2026, 2, 4, 0, 0))

        self.assertEqual(reset_run.users_reset, 1)
        self.assertEqual(PVLedgerService.read_monthly_pv(user), Decimal('50'))

    def test_open_period_requires_force(self):
        self.distributor_with_pv(1, at=utc(2026, 3, 2, 0, 0))

        with self.assertRaises(ValueError):
            MonthlyResetService.run(period='2026-03', now=utc(2026, 3, 10, 0, 0))
        self.assertFalse(PVResetRun.objects.exists())

    def test_force_closes_current_month_immediately(self):
        now = utc(2026, 3, 10, 0, 0)
        user = self.distributor_with_pv(1, at=utc(2026, 3, 2, 0, 0))

        reset_run = MonthlyResetService.run(now=now, force=True)

        self.assertEqual(reset_run.period, '2026-03')
        self.assertEqual(reset_run.cutoff, now)
        self.assertEqual(reset_run.status, PVResetRun.EARLY)
        self.assertEqual(reset_run.users_reset, 1)
        self.assertEqual(PVLedgerService.read_monthly_pv(user), Decimal('0'))
        self.assertFalse(PVResetRun.objects.filter(period='2026-03').exists())
        self.assertEqual(PVLedger.objects.get(user=user).reset_period, '')

    def test_month_end_reset_still_runs_after_early_close(self):
        user = self.distributor_with_pv(1, at=utc(2026, 3, 2, 0, 0))
        MonthlyResetService.run(now=utc(2026, 3, 10, 0, 0), force=True)
        self.accrue(user, 2, utc(2026, 3, 20, 0, 0))

        reset_run = MonthlyResetService.run(period='2026-03', now=utc(2026, 4, 1, 0, 0))

        self.assertEqual(reset_run.status, PVResetRun.COMPLETED)
        self.assertEqual(reset_run.users_reset, 1)
        self.assertEqual(PVLedgerService.read_monthly_pv(user), Decimal('0'))
        self.assertEqual(PVLedger.objects.get(user=user).reset_period, '2026-03')

    def test_future_period_is_refused_even_with_force(self):
        user = self.distributor_with_pv(2, at=utc(2026, 3, 2, 0, 0))

        with self.assertRaises(ValueError):
            MonthlyResetService.run(period='2030-01', now=utc(2026, 3, 10, 0, 0), force=True)

        self.assertFalse(PVResetRun.objects.exists())
        self.assertEqual(PVLedgerService.read_monthly_pv(user), Decimal('100'))
        MonthlyResetService.run(period='2026-03', now=utc(2026, 4, 1, 0, 0))
        self.assertEqual(PVLedgerService.read_monthly_pv(user), Decimal('0'))

    def test_period_is_normalised(self):
        reset_run = MonthlyResetService.run(period='2026-1', now=AFTER_JANUARY)

        self.assertEqual(reset_run.period, '2026-01')

    def test_malformed_period(self):
        with self.assertRaises(ValueError):
            MonthlyResetService.run(period='2026/01', now=AFTER_JANUARY)


class ResumableResetTest(MonthlyResetTestCase):

    def test_partial_failure_is_recorded_and_retried(self):
        first = self.distributor_with_pv(1)
        broken = self.distributor_with_pv(2)
        last = self.distributor_with_pv(3)
        real_reset = MonthlyResetService.reset_ledger

        def flaky_reset(user_id, period, cutoff):
            if user_id == broken.id:
                raise DatabaseError('lock wait timeout')
            return real_reset(user_id, period, cutoff)

        with mock.patch.object(MonthlyResetService, 'reset_ledger', side_effect=flaky_reset):
            with self.assertRaises(ResetPartialFailure) as ctx:
                MonthlyResetService.run(period='2026-01', now=AFTER_JANUARY)

        self.assertEqual(ctx.exception.failed_user_ids, [broken.id])
        reset_run = PVResetRun.objects.get(period='2026-01')
        self.assertEqual(reset_run.status, PVResetRun.PARTIAL)
        self.assertEqual(reset_run.failed_user_ids, [broken.id])
        self.assertEqual(reset_run.last_user_id, last.id)
        self.assertEqual(PVLedgerService.read_monthly_pv(first), Decimal('0'))
        self.assertEqual(PVLedgerService.read_monthly_pv(broken), Decimal('100'))
        self.assertEqual(PVLedgerService.read_monthly_pv(last), Decimal('0'))

        reset_run = MonthlyResetService.run(period='2026-01', now=utc(2026, 2, 1, 7, 0))

        self.assertEqual(reset_run.status, PVResetRun.COMPLETED)
        self.assertEqual(reset_run.failed_user_ids, [])
        self.assertEqual(reset_run.users_reset, 3)
        self.assertEqual(PVLedgerService.read_monthly_pv(broken), Decimal('0'))

    def test_interrupted_run_resumes_after_cursor(self):
        first = self.distributor_with_pv(1)
        second = self.distributor_with_pv(2)
        # A previous run closed the first ledger and then stopped
        MonthlyResetService.reset_ledger(first.id, '2026-01', JANUARY_ANCHOR)
        PVResetRun.objects.create(
            period='2026-01',
            cutoff=JANUARY_ANCHOR,
            last_user_id=first.id,
            users_reset=1,
        )

        with mock.patch.object(MonthlyResetService, 'reset_ledger', wraps=MonthlyResetService.reset_ledger) as spy:
            reset_run = MonthlyResetService.run(period='2026-01', now=AFTER_JANUARY)

        self.assertEqual([c.args[0] for c in spy.call_args_list], [second.id])
        self.assertEqual(reset_run.status, PVResetRun.COMPLETED)
        self.assertEqual(reset_run.users_reset, 2)
        self.assertEqual(PVLedgerService.read_monthly_pv(second), Decimal('0'))

    def test_already_closed_ledger_is_skipped(self):
        user = self.distributor_with_pv(2)
        self.assertTrue(MonthlyResetService.reset_ledger(user.id, '2026-01', JANUARY_ANCHOR))
        self.accrue(user, 1, utc(2026, 2, 2, 0, 0))

        self.assertFalse(MonthlyResetService.reset_ledger(user.id, '2026-01', JANUARY_ANCHOR))
        self.assertEqual(PVLedgerService.read_monthly_pv(user), Decimal('50'))

    def test_targeted_reset_only_touches_given_users(self):
        chosen = self.distributor_with_pv(1)
        untouched = self.distributor_with_pv(2)

        reset_run = MonthlyResetService.run(period='2026-01', now=AFTER_JANUARY, user_ids=[chosen.id])

        self.assertEqual(reset_run.status, PVResetRun.RUNNING)
        self.assertEqual(reset_run.last_user_id, 0)
        self.assertEqual(PVLedgerService.read_monthly_pv(chosen), Decimal('0'))
        self.assertEqual(PVLedgerService.read_monthly_pv(untouched), Decimal('100'))
