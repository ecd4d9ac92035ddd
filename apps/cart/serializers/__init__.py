"""
Cart serializers module.
"""
from .cart_serializers import (
    CartItemSerializer, CartItemUpdateSerializer, FeeSerializer, CartTotalsSerializer
)

__all__ = [
    'CartItemSerializer',
    'CartItemUpdateSerializer',
    'FeeSerializer',
    'CartTotalsSerializer',
]
