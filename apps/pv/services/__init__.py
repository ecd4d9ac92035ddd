"""
PV services module.

All services are exported from this module to maintain backward compatibility.
"""
from .ledger_service import PVLedgerService
from .accrual_service import PVAccrualService
from .discount_service import DistributorDiscountService
from .reset_service import MonthlyResetService
from .display_service import PVDisplayService

__all__ = [
    'PVLedgerService',
    'PVAccrualService',
    'DistributorDiscountService',
    'MonthlyResetService',
    'PVDisplayService',
]
