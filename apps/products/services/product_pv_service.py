"""
Point value (PV) attribute store for products.
"""
import logging
from decimal import Decimal, InvalidOperation

from apps.pv.exceptions import InvalidPVValue
from ..models import Product

logger = logging.getLogger(__name__)

PV_FIELD_ID = 'custom_pv'

# Column limits of Product.pv
PV_MAX_DIGITS = 12
PV_DECIMAL_PLACES = 3
PV_QUANTUM = Decimal(1).scaleb(-PV_DECIMAL_PLACES)
PV_LIMIT = Decimal(10) ** (PV_MAX_DIGITS - PV_DECIMAL_PLACES)


def parse_pv(value):
    """
    Normalise a submitted PV.

    Returns None for "unset" (None or blank string), a non-negative Decimal
    otherwise. Raises InvalidPVValue for negative, non-finite or non-numeric
    input, and for values the PV column cannot store exactly.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidPVValue(value)
    if isinstance(value, str):
        value = value.strip()
        if value == '':
            return None

    try:
        pv = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise InvalidPVValue(value)

    if not pv.is_finite() or pv < 0:
        raise InvalidPVValue(value)
    if pv >= PV_LIMIT:
        raise InvalidPVValue(value, f"Point value {value!r} is too large")
    if pv != pv.quantize(PV_QUANTUM):
        raise InvalidPVValue(value, f"Point value {value!r} has more than {PV_DECIMAL_PLACES} decimal places")
    return pv


class ProductPVService:
    """Read and write the PV attribute of products"""

    @staticmethod
    def _resolve(product_or_id):
        if isinstance(product_or_id, Product):
            return product_or_id
        return Product.objects.filter(pk=product_or_id).first()

    @staticmethod
    def get_pv(product_or_id):
        """PV of a product; 0 when unset or when the product does not exist"""
        product = ProductPVService._resolve(product_or_id)
        if product is None or product.pv is None:
            return Decimal('0')
        return product.pv

    @staticmethod
    def set_pv(product_or_id, value):
        """Persist a product's PV; None or blank clears it"""
        product = ProductPVService._resolve(product_or_id)
        if product is None:
            raise Product.DoesNotExist(f"Product {product_or_id} not found")

        product.pv = parse_pv(value)
        product.save(update_fields=['pv', 'update_time'])
        logger.info(f"Product {product.id} PV set to {product.pv}")
        return product

    @staticmethod
    def save_from_submission(product_or_id, submitted):
        """Persist ``custom_pv`` from a product form submission if present"""
        if PV_FIELD_ID not in submitted:
            return None
        return ProductPVService.set_pv(product_or_id, submitted[PV_FIELD_ID])

    @staticmethod
    def admin_form_field_spec():
        """Declaration of the PV input on the product edit form"""
        return {
            'id': PV_FIELD_ID,
            'label': 'Point Value (PV)',
            'desc_tip': True,
            'description': 'Enter the custom point value for this product.',
            'type': 'number',
            'custom_attributes': {
                'step': 'any',
                'min': '0',
            },
        }

    @staticmethod
    def pv_for_items(items):
        """
        Sum PV over ``(product, quantity)`` pairs.

        Products without a PV contribute nothing.
        """
        total = Decimal('0')
        for product, quantity in items:
            pv = ProductPVService.get_pv(product)
            if pv:
                total += pv * quantity
        return total
