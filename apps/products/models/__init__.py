"""
Product models module.

All models are exported from this module to maintain backward compatibility.
"""
from .category import Category
from .product import Product

__all__ = [
    'Category',
    'Product',
]
