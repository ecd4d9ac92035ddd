from decimal import Decimal

from django.conf import settings
from django.db import models


class PVLedger(models.Model):
    """A user's running PV total for the current monthly cycle"""
    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='pv_ledger')
    monthly_pv = models.DecimalField(max_digits=14, decimal_places=3, default=Decimal('0'))
    last_pv_order = models.DateTimeField(null=True, blank=True)  # Advisory only
    reset_period = models.CharField(max_length=7, blank=True, default='', help_text="Last month closed, YYYY-MM")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'pv_ledgers'
        verbose_name = 'PV Ledger'
        verbose_name_plural = 'PV Ledgers'
        constraints = [
            models.CheckConstraint(condition=models.Q(monthly_pv__gte=0), name='pv_ledger_monthly_pv_non_negative'),
        ]

    def __str__(self):
        return f"{self.user.username} - {self.monthly_pv} PV"
