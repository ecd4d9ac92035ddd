"""
Admin forms for products.
"""
from django import forms

from .models import Product
from .services import ProductPVService
from .services.product_pv_service import PV_DECIMAL_PLACES, PV_FIELD_ID, PV_MAX_DIGITS


def _pv_form_field():
    spec = ProductPVService.admin_form_field_spec()
    return forms.DecimalField(
        label=spec['label'],
        help_text=spec['description'],
        required=False,
        min_value=0,
        max_digits=PV_MAX_DIGITS,
        decimal_places=PV_DECIMAL_PLACES,
        widget=forms.NumberInput(attrs=dict(spec['custom_attributes'], id=spec['id'])),
    )


class ProductAdminForm(forms.ModelForm):
    """Product edit form with the ``custom_pv`` input"""

    class Meta:
        model = Product
        exclude = ['pv']

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields[PV_FIELD_ID] = _pv_form_field()
        if self.instance and self.instance.pk:
            self.fields[PV_FIELD_ID].initial = self.instance.pv
