"""
Distributor discount tiers.

A tier covers ``lower < pv <= upper`` (``upper`` of None is unbounded) and
grants a fixed percentage off the cart. PV outside every tier gets 0%.

The built-in table reproduces the storefront's published rule exactly,
including the uncovered range 562 < pv <= 562.5: it is reported by
``DiscountTierTable.gaps()`` and logged at startup, but not changed here.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional, Tuple

from django.conf import settings


def _to_decimal(value):
    return value if isinstance(value, Decimal) else Decimal(str(value))


@dataclass(frozen=True)
class DiscountTier:
    lower: Decimal
    upper: Optional[Decimal]
    percent: int

    def contains(self, pv):
        return pv > self.lower and (self.upper is None or pv <= self.upper)

    def to_dict(self):
        return {
            'lower_exclusive': str(self.lower),
            'upper_inclusive': None if self.upper is None else str(self.upper),
            'percent': self.percent,
        }


DEFAULT_TIERS = (
    ('0', '74.5', 20),
    ('74.5', '224.5', 30),
    ('224.5', '562', 40),
    ('562.5', None, 50),
)


class DiscountTierTable:
    """Ordered, immutable set of discount tiers"""

    def __init__(self, tiers):
        built = [
            DiscountTier(
                lower=_to_decimal(lower),
                upper=None if upper is None else _to_decimal(upper),
                percent=int(percent),
            )
            for lower, upper, percent in tiers
        ]
        self.tiers: Tuple[DiscountTier, ...] = tuple(sorted(built, key=lambda tier: tier.lower))

    def __iter__(self):
        return iter(self.tiers)

    def __len__(self):
        return len(self.tiers)

    @property
    def percents(self):
        return {0} | {tier.percent for tier in self.tiers}

    def percent_for(self, pv):
        """Discount percentage for a PV total; 0 when no tier matches"""
        if pv is None:
            return 0
        pv = _to_decimal(pv)
        for tier in self.tiers:
            if tier.contains(pv):
                return tier.percent
        return 0

    def gaps(self) -> List[Tuple[Decimal, Decimal]]:
        """``(after, up_to)`` ranges between consecutive tiers that no tier covers"""
        found = []
        for current, following in zip(self.tiers, self.tiers[1:]):
            if current.upper is not None and current.upper < following.lower:
                found.append((current.upper, following.lower))
        return found

    def overlaps(self) -> List[Tuple[DiscountTier, DiscountTier]]:
        found = []
        for current, following in zip(self.tiers, self.tiers[1:]):
            if current.upper is None or current.upper > following.lower:
                found.append((current, following))
        return found

    def to_list(self):
        return [tier.to_dict() for tier in self.tiers]


def get_tier_table():
    """Tier table from ``PV_DISCOUNT['TIERS']``, or the built-in one"""
    configured = settings.PV_DISCOUNT.get('TIERS')
    return DiscountTierTable(configured or DEFAULT_TIERS)


def percent_for(pv):
    return get_tier_table().percent_for(pv)
