"""
Cart services module.
"""
from .cart_service import CartService

__all__ = [
    'CartService',
]
