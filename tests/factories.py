"""
Test factories for creating test data using factory_boy.
"""
from decimal import Decimal

import factory
from django.contrib.auth import get_user_model
from django.utils import timezone
from factory import Faker, SubFactory
from factory.django import DjangoModelFactory

from apps.users.models import Role

User = get_user_model()


class UserFactory(DjangoModelFactory):
    """Factory for creating test users."""

    class Meta:
        model = User
        django_get_or_create = ('username',)
        skip_postgeneration_save = True

    username = factory.Sequence(lambda n: f"testuser{n}")
    email = factory.LazyAttribute(lambda obj: f"{obj.username}@example.com")
    first_name = Faker('first_name')
    last_name = Faker('last_name')
    phone = factory.Sequence(lambda n: f"1380000{n:04d}")
    is_active = True


class CustomerFactory(UserFactory):
    """Factory for users with the customer role."""

    @factory.post_generation
    def customer_role(self, create, extracted, **kwargs):
        if create:
            self.add_role(Role.CUSTOMER)


class DistributorFactory(UserFactory):
    """Factory for users with the distributor role."""
    username = factory.Sequence(lambda n: f"distributor{n}")

    @factory.post_generation
    def distributor_role(self, create, extracted, **kwargs):
        if create:
            self.add_role(Role.DISTRIBUTOR)


class CategoryFactory(DjangoModelFactory):
    """Factory for creating product categories."""

    class Meta:
        model = 'products.Category'
        django_get_or_create = ('name',)

    name = factory.Sequence(lambda n: f"Category {n}")


class ProductFactory(DjangoModelFactory):
    """Factory for creating products."""

    class Meta:
        model = 'products.Product'

    name = factory.Sequence(lambda n: f"Product {n}")
    description = Faker('text', max_nb_chars=200)
    price = Decimal('100.00')
    pv = None
    category = SubFactory(CategoryFactory)
    status = 1  # Active
    inventory = factory.Faker('pyint', min_value=1, max_value=100)


class OrderFactory(DjangoModelFactory):
    """Factory for orders; completed by default without firing completion hooks."""

    class Meta:
        model = 'orders.Order'

    roid = factory.Sequence(lambda n: f"pv_test_{n:06d}")
    uid = SubFactory(DistributorFactory)
    amount = Decimal('0.00')
    status = 3  # Completed
    complete_time = factory.LazyFunction(timezone.now)


class OrderItemFactory(DjangoModelFactory):
    class Meta:
        model = 'orders.OrderItem'

    order = SubFactory(OrderFactory)
    product = SubFactory(ProductFactory)
    quantity = 1
    price = factory.LazyAttribute(lambda obj: obj.product.price)
    amount = factory.LazyAttribute(lambda obj: obj.product.price * obj.quantity)


class CartFactory(DjangoModelFactory):
    class Meta:
        model = 'cart.Cart'

    user = SubFactory(DistributorFactory)


class CartItemFactory(DjangoModelFactory):
    class Meta:
        model = 'cart.CartItem'

    cart = SubFactory(CartFactory)
    product = SubFactory(ProductFactory)
    quantity = 1


def create_order_with_items(user, lines, **kwargs):
    """Completed order for ``user`` with ``(product, quantity)`` lines."""
    order = OrderFactory(uid=user, **kwargs)
    total = Decimal('0.00')
    for product, quantity in lines:
        item = OrderItemFactory(order=order, product=product, quantity=quantity)
        total += item.amount
    order.amount = total
    order.save(update_fields=['amount'])
    return order


def create_cart_with_items(user, lines):
    """Cart for ``user`` holding ``(product, quantity)`` lines."""
    cart = CartFactory(user=user)
    for product, quantity in lines:
        CartItemFactory(cart=cart, product=product, quantity=quantity)
    return cart
