"""
PV serializers module.

All serializers are exported from this module to maintain backward compatibility.
"""
from .pv_serializers import (
    PVLedgerSerializer,
    PVAccrualSerializer,
    PVDashboardSerializer,
    CartPVRowSerializer,
    DiscountTierSerializer,
)

__all__ = [
    'PVLedgerSerializer',
    'PVAccrualSerializer',
    'PVDashboardSerializer',
    'CartPVRowSerializer',
    'DiscountTierSerializer',
]
