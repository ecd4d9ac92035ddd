"""
Product serializers module.

All serializers are exported from this module to maintain backward compatibility.
"""
from .product_serializers import (
    CategorySerializer, ProductListSerializer, ProductDetailSerializer,
    ProductPVUpdateSerializer
)

__all__ = [
    'CategorySerializer',
    'ProductListSerializer',
    'ProductDetailSerializer',
    'ProductPVUpdateSerializer',
]
