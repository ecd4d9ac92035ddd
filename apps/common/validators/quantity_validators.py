"""
Quantity validators.
"""
from rest_framework import serializers


def validate_quantity(value, min_value=1):
    """
    Validate quantity is positive and meets minimum requirement.

    Args:
        value: Quantity integer
        min_value: Minimum allowed quantity (default: 1)

    Raises:
        serializers.ValidationError: If quantity is below minimum

    Returns:
        int: Validated quantity
    """
    if value < min_value:
        raise serializers.ValidationError(f"Quantity must be at least {min_value}.")

    return value
