"""
PV models module.

All models are exported from this module to maintain backward compatibility.
"""
from .ledger import PVLedger
from .accrual import PVAccrual
from .reset_run import PVResetRun

__all__ = [
    'PVLedger',
    'PVAccrual',
    'PVResetRun',
]
