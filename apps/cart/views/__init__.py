"""
Cart views module.
"""
from .cart_views import CartView, CartItemView, CartItemDetailView

__all__ = [
    'CartView',
    'CartItemView',
    'CartItemDetailView',
]
