"""
Distributor discount: tier lookup and the cart fee.
"""
import logging
from decimal import ROUND_HALF_UP, Decimal

from django.conf import settings

from apps.cart.services import CartService
from apps.users.models import is_pv_eligible
from ..sources import get_pv_source
from ..tiers import percent_for

logger = logging.getLogger(__name__)

CENT = Decimal('0.01')


class DistributorDiscountService:
    """Percentage discount granted to distributors from their PV"""

    @staticmethod
    def fee_code():
        return settings.PV_DISCOUNT['FEE_CODE']

    @staticmethod
    def fee_label(percent):
        return settings.PV_DISCOUNT['FEE_LABEL'].format(percent=percent)

    @staticmethod
    def discount_for(user, cart=None, source=None):
        """
        Resolve the discount for ``user``.
        Returns (percent, pv)
        """
        source = source or get_pv_source()
        pv = source.total_for(user, cart)
        return percent_for(pv), pv

    @staticmethod
    def fee_amount(subtotal, percent):
        """Negative fee for ``percent`` off ``subtotal``, rounded to cents"""
        discount = (Decimal(percent) / Decimal(100) * Decimal(subtotal)).quantize(CENT, rounding=ROUND_HALF_UP)
        return -discount

    @staticmethod
    def apply(cart, user, collector, subtotal=None, source=None):
        """
        Add the distributor discount fee to ``collector``.

        Any fee already collected under the discount code is dropped first,
        so applying twice in one pass leaves a single fee. Returns the Fee,
        or None when the user gets no discount or it rounds to nothing.
        """
        code = DistributorDiscountService.fee_code()
        collector.remove_fee(code)

        if not is_pv_eligible(user):
            return None

        percent, pv = DistributorDiscountService.discount_for(user, cart, source=source)
        if percent <= 0:
            return None

        if subtotal is None:
            subtotal = CartService.subtotal(cart)

        amount = DistributorDiscountService.fee_amount(subtotal, percent)
        if not amount:
            return None

        fee = collector.add_fee(code, DistributorDiscountService.fee_label(percent), amount)
        logger.debug(f"User {user.id} PV {pv} -> {percent}% discount, fee {fee.amount}")
        return fee
