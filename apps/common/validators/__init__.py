"""
Common validators module.
"""
from .pv_validators import validate_pv_value
from .quantity_validators import validate_quantity

__all__ = [
    'validate_pv_value',
    'validate_quantity',
]
