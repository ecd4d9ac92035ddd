"""
Ledger service for reading and writing a user's monthly PV.
"""
from decimal import Decimal

from django.db.models import F
from django.utils import timezone

from ..models import PVLedger


class PVLedgerService:
    """Service for PV ledger rows"""

    @staticmethod
    def get_or_create_ledger(user):
        """Get or create the PV ledger for user"""
        ledger, created = PVLedger.objects.get_or_create(user=user)
        return ledger

    @staticmethod
    def get_ledger(user):
        if user is None or user.pk is None:
            return None
        return PVLedger.objects.filter(user=user).first()

    @staticmethod
    def read_monthly_pv(user):
        """Current monthly PV; 0 when the user never accrued any"""
        ledger = PVLedgerService.get_ledger(user)
        if ledger is None:
            return Decimal('0')
        return ledger.monthly_pv

    @staticmethod
    def increment(ledger, amount, at=None):
        """
        Atomically add ``amount`` to a ledger with a single UPDATE.

        The database applies the addition, so a stale in-memory ``ledger``
        never loses a concurrent increment.
        """
        at = at or timezone.now()
        PVLedger.objects.filter(pk=ledger.pk).update(
            monthly_pv=F('monthly_pv') + amount,
            last_pv_order=at,
            updated_at=at,
        )
        ledger.refresh_from_db(fields=['monthly_pv', 'last_pv_order', 'updated_at'])
        return ledger

