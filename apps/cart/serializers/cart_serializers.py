"""
Cart serializers.
"""
from rest_framework import serializers

from apps.common.validators import validate_quantity
from ..models import CartItem


class CartItemSerializer(serializers.ModelSerializer):
    productId = serializers.IntegerField(source='product_id', read_only=True)
    name = serializers.CharField(source='product.name', read_only=True)
    price = serializers.DecimalField(source='product.price', max_digits=10, decimal_places=2, read_only=True)
    pv = serializers.DecimalField(source='product.pv', max_digits=12, decimal_places=3, read_only=True, allow_null=True)
    lineTotal = serializers.DecimalField(source='line_total', max_digits=12, decimal_places=2, read_only=True)

    class Meta:
        model = CartItem
        fields = ['id', 'productId', 'name', 'price', 'pv', 'quantity', 'lineTotal']


class CartItemUpdateSerializer(serializers.Serializer):
    """Payload for POST /api/cart/items/"""
    product_id = serializers.IntegerField()
    quantity = serializers.IntegerField(validators=[lambda value: validate_quantity(value, min_value=0)])


class FeeSerializer(serializers.Serializer):
    code = serializers.CharField()
    label = serializers.CharField()
    amount = serializers.DecimalField(max_digits=12, decimal_places=2)


class CartTotalsSerializer(serializers.Serializer):
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2)
    fees = FeeSerializer(many=True)
    rows = serializers.ListField(child=serializers.DictField())
    total = serializers.DecimalField(max_digits=12, decimal_places=2)
