"""
Product services module.

All services are exported from this module to maintain backward compatibility.
"""
from .product_pv_service import ProductPVService, parse_pv

__all__ = [
    'ProductPVService',
    'parse_pv',
]
