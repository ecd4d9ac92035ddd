"""
Order serializers module.

All serializers are exported from this module to maintain backward compatibility.
"""
from .order_serializers import (
    OrderItemSerializer, OrderSerializer, OrderCreateSerializer, OrderCompleteSerializer
)

__all__ = [
    'OrderItemSerializer',
    'OrderSerializer',
    'OrderCreateSerializer',
    'OrderCompleteSerializer',
]
