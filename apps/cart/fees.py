"""
Value objects for one cart totals calculation.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List


@dataclass(frozen=True)
class Fee:
    """A signed adjustment to the cart total; negative amounts are discounts"""
    code: str
    label: str
    amount: Decimal


class FeeCollector:
    """
    Fees gathered during a single calculation pass.

    Fees are keyed by code: adding a fee whose code is already present
    replaces the earlier one, so re-running a fee hook never stacks.
    """

    def __init__(self):
        self._fees: Dict[str, Fee] = {}

    def add_fee(self, code, label, amount):
        fee = Fee(code=code, label=label, amount=Decimal(amount))
        self._fees[code] = fee
        return fee

    def remove_fee(self, code):
        self._fees.pop(code, None)

    def get(self, code):
        return self._fees.get(code)

    @property
    def fees(self) -> List[Fee]:
        return list(self._fees.values())

    @property
    def total(self) -> Decimal:
        return sum((fee.amount for fee in self._fees.values()), Decimal('0.00'))

    def __len__(self):
        return len(self._fees)


@dataclass
class CartTotals:
    subtotal: Decimal
    fees: List[Fee] = field(default_factory=list)
    rows: List[dict] = field(default_factory=list)

    @property
    def fee_total(self) -> Decimal:
        return sum((fee.amount for fee in self.fees), Decimal('0.00'))

    @property
    def total(self) -> Decimal:
        return self.subtotal + self.fee_total
