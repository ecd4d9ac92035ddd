from django.db import models
from django.conf import settings
from django.utils import timezone


class Order(models.Model):
    """Storefront order; immutable once completed"""

    PENDING_PAYMENT = -1
    PAID = 1
    SHIPPED = 2
    COMPLETED = 3
    REFUNDED = 4
    CANCELLED = 5

    STATUS_CHOICES = [
        (PENDING_PAYMENT, 'Pending Payment'),
        (PAID, 'Paid'),
        (SHIPPED, 'Shipped'),
        (COMPLETED, 'Completed'),
        (REFUNDED, 'Refunded'),
        (CANCELLED, 'Cancelled'),
    ]

    roid = models.CharField(max_length=50, unique=True, help_text="Public order number")
    # Guest orders have no purchaser
    uid = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        db_column='uid',
        related_name='orders',
        help_text="Purchaser",
    )

    create_time = models.DateTimeField(default=timezone.now)
    pay_time = models.DateTimeField(null=True, blank=True)
    send_time = models.DateTimeField(null=True, blank=True)
    complete_time = models.DateTimeField(null=True, blank=True)

    amount = models.DecimalField(max_digits=10, decimal_places=2, help_text="Total order amount")
    status = models.IntegerField(choices=STATUS_CHOICES, default=PENDING_PAYMENT)
    remark = models.TextField(blank=True, default='')

    class Meta:
        db_table = 'orders'
        ordering = ['-create_time']
        indexes = [
            models.Index(fields=['uid'], name='orders_uid_idx'),
            models.Index(fields=['status'], name='orders_status_idx'),
            models.Index(fields=['create_time'], name='orders_create_time_idx'),
        ]

    def __str__(self):
        return f"Order {self.roid}"

    @property
    def is_completed(self):
        return self.status == self.COMPLETED

    def save(self, *args, **kwargs):
        if self.status == self.PAID and not self.pay_time:
            self.pay_time = timezone.now()
        elif self.status == self.SHIPPED and not self.send_time:
            self.send_time = timezone.now()
        elif self.status == self.COMPLETED and not self.complete_time:
            self.complete_time = timezone.now()

        super().save(*args, **kwargs)
