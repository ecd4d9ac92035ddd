from django.conf import settings
from django.db import models
from django.utils import timezone


class PVAccrual(models.Model):
    """Append-only record of PV credited for one completed order"""
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='pv_accruals')
    # One accrual per order
    order = models.OneToOneField('orders.Order', on_delete=models.CASCADE, related_name='pv_accrual')
    pv = models.DecimalField(max_digits=14, decimal_places=3)
    created_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        db_table = 'pv_accruals'
        ordering = ['-created_at']
        verbose_name = 'PV Accrual'
        verbose_name_plural = 'PV Accruals'

    def __str__(self):
        return f"{self.user.username} +{self.pv} PV ({self.order.roid})"
