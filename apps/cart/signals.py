"""
Cart calculation hooks.

``cart_calculate_fees`` is sent once per totals calculation, before the total
is computed, with ``cart``, ``user``, ``subtotal`` and ``collector`` (a
FeeCollector).

``cart_totals_rows`` is sent when totals are rendered, with ``cart``, ``user``
and ``rows`` (a list receivers append display rows to).
"""
from django.dispatch import Signal

cart_calculate_fees = Signal()
cart_totals_rows = Signal()
