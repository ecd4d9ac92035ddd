"""
Role tags carried by users.

Roles are stored as Django auth groups named after the enum values, so they
can be granted from the admin like any other group.
"""
from django.db import models


class Role(models.TextChoices):
    DISTRIBUTOR = 'distributor', 'Distributor'
    CUSTOMER = 'customer', 'Customer'


def is_pv_eligible(user):
    """Whether ``user`` takes part in PV accrual and distributor discounts"""
    if user is None or not getattr(user, 'is_authenticated', False):
        return False
    return user.has_role(Role.DISTRIBUTOR)
