"""
User models module.

All models are exported from this module to maintain backward compatibility.
"""
from .roles import Role, is_pv_eligible
from .user import User

__all__ = [
    'Role',
    'User',
    'is_pv_eligible',
]
