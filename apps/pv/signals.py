"""
Receivers wiring the PV policy into order and cart events.

A PV error must never break checkout or order processing: receivers report
it to the operator log and return.
"""
import logging

from django.dispatch import receiver

from apps.cart.signals import cart_calculate_fees, cart_totals_rows
from apps.orders.signals import order_completed
from .exceptions import PVError, report_pv_error
from .services import DistributorDiscountService, PVAccrualService, PVDisplayService

logger = logging.getLogger(__name__)


@receiver(order_completed)
def accrue_pv_on_order_completed(sender, order, **kwargs):
    """Credit the order's PV to its purchaser"""
    try:
        PVAccrualService.accrue_for_order(order)
    except PVError as e:
        report_pv_error(e, hook='order_completed', order=order.roid)


@receiver(cart_calculate_fees)
def apply_distributor_discount(sender, cart, user, collector, subtotal=None, **kwargs):
    """Add the distributor discount fee for the cart owner"""
    try:
        DistributorDiscountService.apply(cart, user, collector, subtotal=subtotal)
    except PVError as e:
        report_pv_error(e, hook='cart_calculate_fees', cart=cart.pk)


@receiver(cart_totals_rows)
def add_cart_pv_row(sender, cart, user, rows, **kwargs):
    """Show the cart's total PV to distributors"""
    row = PVDisplayService.cart_pv_row(cart, user)
    if row is not None:
        rows.append(row)
