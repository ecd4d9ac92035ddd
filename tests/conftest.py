"""
Test configuration for the distributor PV server.
"""
import os
from decimal import Decimal

import pytest


def pytest_configure():
    """Point Django at the test settings."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'pv_server.settings.test')


@pytest.fixture
def user_factory():
    """Factory for creating test users."""
    from tests.factories import UserFactory
    return UserFactory


@pytest.fixture
def customer():
    """A signed-up user without the distributor role."""
    from tests.factories import CustomerFactory
    return CustomerFactory()


@pytest.fixture
def distributor():
    """A user holding the distributor role."""
    from tests.factories import DistributorFactory
    return DistributorFactory()


@pytest.fixture
def staff_user():
    from tests.factories import UserFactory
    return UserFactory(is_staff=True)


@pytest.fixture
def pv_product():
    """Product priced 250.00 carrying 50 PV."""
    from tests.factories import ProductFactory
    return ProductFactory(price=Decimal('250.00'), pv=Decimal('50'))


@pytest.fixture
def plain_product():
    """Product without a PV."""
    from tests.factories import ProductFactory
    return ProductFactory(price=Decimal('100.00'), pv=None)


@pytest.fixture
def api_client():
    from rest_framework.test import APIClient
    return APIClient()
