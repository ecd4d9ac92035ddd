"""
Order services module.

All services are exported from this module to maintain backward compatibility.
"""
from .order_service import OrderService

__all__ = [
    'OrderService',
]
