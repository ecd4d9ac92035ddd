"""
Order lifecycle signals.

``order_completed`` is sent exactly once per order, when it transitions into
the completed state. Receivers get ``order`` as a keyword argument.
"""
from django.dispatch import Signal

order_completed = Signal()
