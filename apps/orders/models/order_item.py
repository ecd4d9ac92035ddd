from django.db import models


class OrderItem(models.Model):
    """Order line item - a product and the quantity bought"""

    order = models.ForeignKey('Order', on_delete=models.CASCADE, related_name='items')
    product = models.ForeignKey('products.Product', on_delete=models.PROTECT, related_name='order_items')
    quantity = models.PositiveIntegerField()
    price = models.DecimalField(max_digits=10, decimal_places=2, help_text="Unit price")
    amount = models.DecimalField(max_digits=10, decimal_places=2, help_text="Line total (quantity * price)")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'order_items'
        indexes = [
            models.Index(fields=['order'], name='order_items_order_idx'),
        ]

    def __str__(self):
        return f"OrderItem {self.order_id} - {self.product_id} x{self.quantity}"

    def save(self, *args, **kwargs):
        if not self.amount:
            self.amount = self.quantity * self.price
        super().save(*args, **kwargs)
