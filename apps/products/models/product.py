from django.core.validators import MinValueValidator
from django.db import models


class Product(models.Model):
    """Catalog product carrying an optional point value (PV)"""
    STATUS_ACTIVE = 1
    STATUS_INACTIVE = -1

    name = models.CharField(max_length=200)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    description = models.TextField(blank=True, default='')
    status = models.IntegerField(default=STATUS_ACTIVE, help_text="1=active, -1=inactive")
    inventory = models.IntegerField(default=0, help_text="Stock quantity")

    # Point value; NULL means unset and reads as 0
    pv = models.DecimalField(
        max_digits=12,
        decimal_places=3,
        null=True,
        blank=True,
        db_column='custom_pv',
        validators=[MinValueValidator(0)],
        verbose_name='Point Value (PV)',
    )

    category = models.ForeignKey('Category', on_delete=models.SET_NULL, null=True, blank=True)
    create_time = models.DateTimeField(auto_now_add=True)
    update_time = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'products'
        indexes = [
            models.Index(fields=['status'], name='products_status_idx'),
            models.Index(fields=['create_time'], name='products_create_time_idx'),
        ]

    def __str__(self):
        return f"{self.name} (id: {self.id})"

    @property
    def is_active(self):
        return self.status == self.STATUS_ACTIVE
