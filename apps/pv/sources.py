"""
Where the PV that drives the distributor discount comes from.

``CartLivePV`` looks only at the cart being priced; ``StoredMonthlyPV``
uses the PV accrued from completed orders this month. The active source is
chosen by ``PV_DISCOUNT['SOURCE']``.
"""
from decimal import Decimal

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from apps.products.services import ProductPVService


class PVSource:
    name = None

    def total_for(self, user, cart=None):
        raise NotImplementedError


class CartLivePV(PVSource):
    """PV of the current cart contents; ignores purchase history"""
    name = 'cart_live'

    def total_for(self, user, cart=None):
        if cart is None:
            return Decimal('0')
        return ProductPVService.pv_for_items(cart.line_items())


class StoredMonthlyPV(PVSource):
    """The user's accrued PV for the current month"""
    name = 'stored_monthly'

    def total_for(self, user, cart=None):
        from .services.ledger_service import PVLedgerService
        return PVLedgerService.read_monthly_pv(user)


PV_SOURCES = {
    CartLivePV.name: CartLivePV,
    StoredMonthlyPV.name: StoredMonthlyPV,
}


def get_pv_source(name=None):
    """Instantiate the named source, defaulting to the configured one"""
    name = name or settings.PV_DISCOUNT.get('SOURCE') or StoredMonthlyPV.name
    if name in PV_SOURCES:
        return PV_SOURCES[name]()
    try:
        source_class = import_string(name)
    except ImportError as exc:
        raise ImproperlyConfigured(f"Unknown PV_DISCOUNT['SOURCE'] {name!r}") from exc
    return source_class()
