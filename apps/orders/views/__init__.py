"""
Order views module.

All views are exported from this module to maintain backward compatibility.
"""
from .order_views import CreateOrderView, GetMyOrderView
from .order_actions import CompleteOrderView

__all__ = [
    'CreateOrderView',
    'GetMyOrderView',
    'CompleteOrderView',
]
