"""
Month-end PV reset.

Each ledger is closed in its own transaction under a row lock, and the
``PVResetRun`` row for the period records how far the run got, so a crashed
or partially failed run can simply be started again.

A forced reset of the month still in progress zeroes ledgers without closing
the period; the month-end run for it happens as usual.
"""
import logging
from decimal import Decimal

from django.db import DatabaseError, transaction
from django.db.models import Sum
from django.utils import timezone

from ..exceptions import ResetPartialFailure
from ..models import PVLedger, PVResetRun
from ..schedule import anchor_for_period, due_period, parse_period, period_for
from .accrual_service import PVAccrualService

logger = logging.getLogger(__name__)


class MonthlyResetService:
    """Close a monthly PV cycle for every ledger"""

    @staticmethod
    def resolve_period(period=None, now=None, force=False):
        """
        Period to close and its cutoff instant.
        Returns (period, cutoff)
        """
        now = now or timezone.now()
        current = period_for(timezone.localtime(now))
        if period is None:
            period = current if force else due_period(now)
        else:
            year, month = parse_period(period)
            period = f"{year:04d}-{month:02d}"

        if period > current:
            raise ValueError(f"Period {period} has not started yet")
        anchor = anchor_for_period(period)
        if anchor > now and not force:
            raise ValueError(f"Period {period} closes at {anchor.isoformat()}; use force to close it early")
        return period, min(anchor, now)

    @staticmethod
    def reset_ledger(user_id, period, cutoff, close_period=True):
        """
        Reset one user's ledger for ``period``.

        PV accrued after ``cutoff`` belongs to the next cycle and is carried
        over. With ``close_period`` the ledger is marked closed for
        ``period`` and later resets of that period skip it.
        Returns False when the ledger is missing or already closed.
        """
        with transaction.atomic():
            ledger = PVLedger.objects.select_for_update().filter(user_id=user_id).first()
            if ledger is None:
                return False
            if ledger.reset_period and ledger.reset_period >= period:
                return False

            carried = PVAccrualService.accrued_since(user_id, cutoff)
            previous = ledger.monthly_pv
            ledger.monthly_pv = carried
            update_fields = ['monthly_pv', 'updated_at']
            if close_period:
                ledger.reset_period = period
                update_fields.append('reset_period')
            ledger.save(update_fields=update_fields)

        logger.debug(f"Reset PV for user {user_id}: {previous} -> {carried} ({period})")
        return True

    @staticmethod
    def _pending_user_ids(reset_run, user_ids=None):
        if user_ids:
            return sorted(set(user_ids))
        retry = sorted(set(reset_run.failed_user_ids))
        remaining = list(
            PVLedger.objects.filter(user_id__gt=reset_run.last_user_id)
            .order_by('user_id')
            .values_list('user_id', flat=True)
        )
        return retry + [uid for uid in remaining if uid not in retry]

    @staticmethod
    def reset_early(period, cutoff, user_ids=None):
        """
        Zero ledgers before ``period`` has ended.

        Neither the ledgers nor the period are marked closed. Nothing is
        persisted for the run, so running it again resets every ledger
        again. Returns an unsaved PVResetRun with status EARLY.
        """
        reset_run = PVResetRun(period=period, cutoff=cutoff, started_at=cutoff, status=PVResetRun.EARLY)
        if user_ids:
            pending = sorted(set(user_ids))
        else:
            pending = PVLedger.objects.order_by('user_id').values_list('user_id', flat=True)

        failed = []
        for user_id in pending:
            try:
                if MonthlyResetService.reset_ledger(user_id, period, cutoff, close_period=False):
                    reset_run.users_reset += 1
            except DatabaseError as e:
                logger.error(f"Early PV reset for user {user_id} ({period}) failed: {e}")
                failed.append(user_id)

        reset_run.failed_user_ids = failed
        reset_run.finished_at = timezone.now()
        if failed:
            raise ResetPartialFailure(period, failed)

        logger.warning(
            f"PV for {period} reset early at {cutoff.isoformat()}, {reset_run.users_reset} ledgers reset; "
            f"the month-end reset still runs"
        )
        return reset_run

    @staticmethod
    def run(period=None, now=None, force=False, user_ids=None):
        """
        Reset monthly PV for ``period``.

        A completed period is left alone. Users whose reset fails are
        recorded on the run; the run is then marked partial and
        ResetPartialFailure is raised. Running again retries them and
        continues after the last user processed. ``user_ids`` limits the
        run to those users and leaves the cursor where it is.
        A forced run for the month in progress goes through reset_early.
        Returns the PVResetRun.
        """
        now = now or timezone.now()
        period, cutoff = MonthlyResetService.resolve_period(period, now=now, force=force)
        if cutoff < anchor_for_period(period):
            return MonthlyResetService.reset_early(period, cutoff, user_ids=user_ids)

        reset_run, created = PVResetRun.objects.get_or_create(
            period=period,
            defaults={'cutoff': cutoff, 'started_at': now},
        )
        if reset_run.is_completed and not user_ids:
            logger.info(f"PV reset for {period} already completed, nothing to do")
            return reset_run
        if not created:
            logger.info(
                f"Resuming PV reset for {period} after user {reset_run.last_user_id}, "
                f"{len(reset_run.failed_user_ids)} to retry"
            )

        targeted = bool(user_ids)
        failed = set()
        previously_failed = set(reset_run.failed_user_ids)

        for user_id in MonthlyResetService._pending_user_ids(reset_run, user_ids):
            try:
                changed = MonthlyResetService.reset_ledger(user_id, period, reset_run.cutoff)
            except DatabaseError as e:
                logger.error(f"PV reset for user {user_id} ({period}) failed: {e}")
                failed.add(user_id)
                changed = False
            else:
                previously_failed.discard(user_id)

            if changed:
                reset_run.users_reset += 1
            if not targeted and user_id > reset_run.last_user_id:
                reset_run.last_user_id = user_id
            reset_run.save(update_fields=['users_reset', 'last_user_id'])

        still_failed = sorted(previously_failed | failed) if targeted else sorted(failed)

        reset_run.failed_user_ids = still_failed
        if not targeted or reset_run.status == PVResetRun.PARTIAL:
            reset_run.status = PVResetRun.PARTIAL if still_failed else PVResetRun.COMPLETED
            reset_run.finished_at = timezone.now()
        reset_run.save(update_fields=['failed_user_ids', 'status', 'finished_at'])

        if failed:
            raise ResetPartialFailure(period, sorted(failed))

        logger.info(f"PV reset for {period} complete, {reset_run.users_reset} ledgers reset")
        return reset_run

    @staticmethod
    def total_outstanding_pv():
        """Sum of monthly PV across all ledgers"""
        total = PVLedger.objects.aggregate(total=Sum('monthly_pv'))['total']
        return total or Decimal('0')
