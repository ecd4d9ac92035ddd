from django.conf import settings
from django.db import models


class Cart(models.Model):
    """Shopping cart of an active checkout session"""
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='cart',
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'carts'

    def __str__(self):
        owner = self.user.username if self.user_id else 'guest'
        return f"Cart {self.id} ({owner})"

    def line_items(self):
        """``(product, quantity)`` pairs of the cart contents"""
        return [(item.product, item.quantity) for item in self.items.select_related('product')]
