"""
Point value (PV) validators.
"""
from decimal import Decimal
from rest_framework import serializers


def validate_pv_value(value):
    """
    Validate a product point value.

    Args:
        value: PV decimal or None

    Raises:
        serializers.ValidationError: If PV is negative

    Returns:
        decimal.Decimal: Validated PV (None clears the attribute)
    """
    if value is None:
        return value

    if Decimal(str(value)) < 0:
        raise serializers.ValidationError("Point value must be zero or greater.")

    return value
