"""
PV views module.

All views are exported from this module to maintain backward compatibility.
"""
from .pv_views import (
    get_product_pv,
    get_pv_dashboard,
    get_cart_pv,
    get_discount_tiers,
    get_user_ledger,
)

__all__ = [
    'get_product_pv',
    'get_pv_dashboard',
    'get_cart_pv',
    'get_discount_tiers',
    'get_user_ledger',
]
