"""
Core order service for order creation, completion and query.
"""
import logging
import uuid
from decimal import Decimal
from typing import Dict, List, Optional, Tuple

from django.db import transaction

from apps.products.models import Product
from ..models import Order, OrderItem
from ..signals import order_completed

logger = logging.getLogger(__name__)


class OrderService:
    """Service class for core order business logic"""

    @staticmethod
    def generate_order_id() -> str:
        """Generate unique public order number"""
        return f"pv_{uuid.uuid4().hex[:12]}"

    @staticmethod
    def validate_order_items(items: List[Dict]) -> Tuple[bool, str]:
        """Validate requested line items"""
        if not items:
            return False, "Order must contain at least one item"

        for item in items:
            if not all(key in item for key in ['product_id', 'quantity']):
                return False, "Each item must have product_id and quantity"
            if item['quantity'] <= 0:
                return False, "Quantity must be greater than 0"

        return True, ""

    @staticmethod
    @transaction.atomic
    def create_order(user, items: List[Dict], remark: str = '') -> Tuple[Optional[Order], str]:
        """
        Create a pending order with its line items.
        ``user`` may be None for guest checkout.
        Returns (Order, error_message)
        """
        is_valid, error_msg = OrderService.validate_order_items(items)
        if not is_valid:
            return None, error_msg

        product_ids = [item['product_id'] for item in items]
        products = Product.objects.in_bulk(product_ids)
        missing = [pid for pid in product_ids if pid not in products]
        if missing:
            return None, f"Products not found: {missing}"

        total = Decimal('0.00')
        for item in items:
            total += products[item['product_id']].price * item['quantity']

        order = Order.objects.create(
            roid=OrderService.generate_order_id(),
            uid=user,
            amount=total,
            remark=remark,
        )

        for item in items:
            product = products[item['product_id']]
            OrderItem.objects.create(
                order=order,
                product=product,
                quantity=item['quantity'],
                price=product.price,
                amount=product.price * item['quantity'],
            )

        logger.info(f"Order {order.roid} created with {len(items)} items")
        return order, ""

    @staticmethod
    def complete_order(roid: str) -> Tuple[bool, str]:
        """
        Move an order into the completed state.

        The transition happens at most once; ``order_completed`` is sent only
        when this call performed it, after the status change is committed.
        Returns (success, message)
        """
        with transaction.atomic():
            order = Order.objects.select_for_update().filter(roid=roid).first()
            if order is None:
                return False, "Order not found"
            if order.status == Order.COMPLETED:
                return True, "Order already completed"
            if order.status in (Order.REFUNDED, Order.CANCELLED):
                return False, f"Order cannot be completed from status {order.get_status_display()}"

            order.status = Order.COMPLETED
            order.save()

        logger.info(f"Order {order.roid} completed")
        order_completed.send(sender=Order, order=order)
        return True, "Order completed"

    @staticmethod
    def get_user_orders(user) -> List[Order]:
        return list(
            Order.objects.filter(uid=user).prefetch_related('items__product')
        )
