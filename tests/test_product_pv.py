"""
Tests for the product PV attribute store.
"""
from decimal import Decimal

import pytest
from django.test import TestCase

from apps.products.forms import ProductAdminForm
from apps.products.models import Product
from apps.products.services import ProductPVService, parse_pv
from apps.pv.exceptions import InvalidPVValue
from tests.factories import ProductFactory


@pytest.mark.parametrize('value, expected', [
    (None, None),
    ('', None),
    ('   ', None),
    ('12.5', Decimal('12.5')),
    (' 7 ', Decimal('7')),
    (0, Decimal('0')),
    (3, Decimal('3')),
    (2.25, Decimal('2.25')),
    (Decimal('0.001'), Decimal('0.001')),
])
def test_parse_pv_accepts_numbers_and_unset(value, expected):
    assert parse_pv(value) == expected


@pytest.mark.parametrize('value', ['-1', -0.5, 'abc', '1,5', 'NaN', 'Infinity', True, [1]])
def test_parse_pv_rejects_invalid_values(value):
    with pytest.raises(InvalidPVValue):
        parse_pv(value)


@pytest.mark.parametrize('value', ['0.0004', '1.2345', '1e12', '1000000000', Decimal('1E+30')])
def test_parse_pv_rejects_values_the_column_cannot_store(value):
    with pytest.raises(InvalidPVValue):
        parse_pv(value)


def test_parse_pv_accepts_column_limits():
    assert parse_pv('999999999.999') == Decimal('999999999.999')
    assert parse_pv('1.500') == Decimal('1.5')


class ProductPVServiceTest(TestCase):
    """Reading and writing product PV"""

    def setUp(self):
        self.product = ProductFactory(pv=None)

    def test_unset_pv_reads_as_zero(self):
        self.assertEqual(ProductPVService.get_pv(self.product), Decimal('0'))
        self.assertEqual(ProductPVService.get_pv(self.product.id), Decimal('0'))

    def test_missing_product_reads_as_zero(self):
        self.assertEqual(ProductPVService.get_pv(999999), Decimal('0'))

    def test_set_pv_persists_value(self):
        ProductPVService.set_pv(self.product.id, '12.5')
        self.product.refresh_from_db()
        self.assertEqual(self.product.pv, Decimal('12.5'))
        self.assertEqual(ProductPVService.get_pv(self.product), Decimal('12.5'))

    def test_blank_clears_pv(self):
        ProductPVService.set_pv(self.product, 40)
        ProductPVService.set_pv(self.product, '')
        self.product.refresh_from_db()
        self.assertIsNone(self.product.pv)

    def test_negative_pv_is_rejected_and_not_saved(self):
        ProductPVService.set_pv(self.product, 10)
        with self.assertRaises(InvalidPVValue):
            ProductPVService.set_pv(self.product, '-3')
        self.product.refresh_from_db()
        self.assertEqual(self.product.pv, Decimal('10'))

    def test_set_pv_on_missing_product(self):
        with self.assertRaises(Product.DoesNotExist):
            ProductPVService.set_pv(999999, 5)

    def test_submission_without_field_leaves_pv(self):
        ProductPVService.set_pv(self.product, 8)
        result = ProductPVService.save_from_submission(self.product, {'name': 'Renamed'})
        self.assertIsNone(result)
        self.product.refresh_from_db()
        self.assertEqual(self.product.pv, Decimal('8'))

    def test_submission_with_field_saves_pv(self):
        ProductPVService.save_from_submission(self.product, {'custom_pv': '15'})
        self.product.refresh_from_db()
        self.assertEqual(self.product.pv, Decimal('15'))

    def test_pv_for_items_skips_products_without_pv(self):
        with_pv = ProductFactory(pv=Decimal('50'))
        items = [(with_pv, 2), (self.product, 5)]
        self.assertEqual(ProductPVService.pv_for_items(items), Decimal('100'))


def test_admin_form_field_spec():
    spec = ProductPVService.admin_form_field_spec()
    assert spec['id'] == 'custom_pv'
    assert spec['label'] == 'Point Value (PV)'
    assert spec['type'] == 'number'
    assert spec['description'] == 'Enter the custom point value for this product.'
    assert spec['custom_attributes'] == {'step': 'any', 'min': '0'}


@pytest.mark.django_db
def test_admin_form_renders_pv_input():
    product = ProductFactory(pv=Decimal('12.5'))
    form = ProductAdminForm(instance=product)
    field = form.fields['custom_pv']
    assert field.initial == Decimal('12.5')
    assert field.widget.attrs['step'] == 'any'
    assert str(field.widget.attrs['min']) == '0'
    assert 'pv' not in form.fields


@pytest.mark.django_db
def test_admin_form_rejects_negative_pv():
    product = ProductFactory()
    form = ProductAdminForm(
        data={
            'name': product.name,
            'price': '100.00',
            'description': '',
            'status': 1,
            'inventory': 5,
            'custom_pv': '-1',
        },
        instance=product,
    )
    assert not form.is_valid()
    assert 'custom_pv' in form.errors


@pytest.mark.django_db
@pytest.mark.parametrize('submitted', ['0.0004', '1000000000'])
def test_admin_form_rejects_pv_outside_column_limits(submitted):
    form = ProductAdminForm(data={
        'name': 'Serum',
        'description': '',
        'price': '10.00',
        'status': 1,
        'inventory': 5,
        'custom_pv': submitted,
    })
    assert not form.is_valid()
    assert 'custom_pv' in form.errors
