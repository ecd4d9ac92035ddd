"""
PV figures shown on the product page, cart totals and account dashboard.
"""
from decimal import Decimal

from django.utils import timezone

from apps.products.services import ProductPVService
from apps.users.models import is_pv_eligible
from ..schedule import expiry_date, next_reset_at
from ..sources import CartLivePV, get_pv_source
from ..tiers import percent_for
from .discount_service import DistributorDiscountService
from .ledger_service import PVLedgerService

PRODUCT_PV_LABEL = 'Point Value (PV)'
CART_PV_LABEL = 'Total PV'


def format_pv(value):
    """Render a PV amount without trailing zeros (``50.000`` -> ``50``)"""
    value = Decimal(value)
    if value == value.to_integral_value():
        return str(value.quantize(Decimal('1')))
    return format(value.normalize(), 'f')


class PVDisplayService:
    """Build the PV payloads rendered by the storefront"""

    @staticmethod
    def product_pv(product):
        """PV badge for a product page; None when the product has no PV"""
        pv = ProductPVService.get_pv(product)
        if not pv:
            return None
        return {
            'label': PRODUCT_PV_LABEL,
            'pv': format_pv(pv),
        }

    @staticmethod
    def cart_pv_row(cart, user):
        """
        Totals row with the cart's PV for distributors; None for others.

        ``value`` is always the PV of the cart contents; the discount
        percent follows the configured PV source.
        """
        if not is_pv_eligible(user):
            return None

        cart_pv = CartLivePV().total_for(user, cart)
        source = get_pv_source()
        discount_pv = cart_pv if source.name == CartLivePV.name else source.total_for(user, cart)
        return {
            'label': CART_PV_LABEL,
            'value': format_pv(cart_pv),
            'discount_percent': percent_for(discount_pv),
            'source': source.name,
        }

    @staticmethod
    def dashboard(user, today=None, cart=None):
        """
        Monthly PV summary for the account dashboard.

        The discount is the one checkout would grant: 0 for users without
        the distributor role, otherwise resolved from the configured PV
        source (``cart`` is used by the live cart source).
        """
        current = PVLedgerService.read_monthly_pv(user)
        ledger = PVLedgerService.get_ledger(user)
        eligible = is_pv_eligible(user)
        percent = DistributorDiscountService.discount_for(user, cart)[0] if eligible else 0
        return {
            'current_pv': format_pv(current),
            'current_pv_label': 'Your Current Monthly PV',
            'discount_percent': percent,
            'discount_label': 'Your Current Discount',
            'expires_on': expiry_date(today or timezone.localdate()),
            'expiry_label': 'PV Expiry Date',
            'last_pv_order': ledger.last_pv_order if ledger else None,
            'next_reset_at': next_reset_at(),
            'is_distributor': eligible,
        }
