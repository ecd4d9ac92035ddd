"""
Cart contents and totals calculation.
"""
import logging
from decimal import Decimal

from django.db import transaction

from apps.products.models import Product
from ..fees import CartTotals, FeeCollector
from ..models import Cart, CartItem
from ..signals import cart_calculate_fees, cart_totals_rows

logger = logging.getLogger(__name__)


class CartService:
    """Service for cart contents and totals"""

    @staticmethod
    def get_or_create_cart(user):
        cart, created = Cart.objects.get_or_create(user=user)
        return cart

    @staticmethod
    @transaction.atomic
    def set_item(cart, product_id, quantity):
        """Set the quantity of a product in the cart; 0 removes the line"""
        product = Product.objects.filter(pk=product_id, status=Product.STATUS_ACTIVE).first()
        if product is None:
            return None, "Product not found"

        if quantity <= 0:
            CartItem.objects.filter(cart=cart, product=product).delete()
            return None, ""

        item, _ = CartItem.objects.update_or_create(
            cart=cart,
            product=product,
            defaults={'quantity': quantity},
        )
        return item, ""

    @staticmethod
    def remove_item(cart, item_id):
        deleted, _ = CartItem.objects.filter(cart=cart, pk=item_id).delete()
        return deleted > 0

    @staticmethod
    def subtotal(cart):
        total = Decimal('0.00')
        for product, quantity in cart.line_items():
            total += product.price * quantity
        return total

    @staticmethod
    def calculate_totals(cart, user=None):
        """
        Run one fee calculation pass and compute the cart totals.

        Fees start empty on every pass; receivers of ``cart_calculate_fees``
        add theirs to the collector before the total is taken.
        """
        subtotal = CartService.subtotal(cart)
        collector = FeeCollector()
        cart_calculate_fees.send(sender=Cart, cart=cart, user=user, collector=collector, subtotal=subtotal)

        rows = []
        cart_totals_rows.send(sender=Cart, cart=cart, user=user, rows=rows)

        totals = CartTotals(subtotal=subtotal, fees=collector.fees, rows=rows)
        logger.debug(f"Cart {cart.id} totals: subtotal={totals.subtotal} fees={totals.fee_total}")
        return totals
