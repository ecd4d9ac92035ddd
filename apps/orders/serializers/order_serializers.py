"""
Order serializers for list, detail, and create operations.
"""
from rest_framework import serializers

from apps.common.validators import validate_quantity
from ..models import Order, OrderItem


class OrderItemSerializer(serializers.ModelSerializer):
    """Serializer for order items"""
    productId = serializers.IntegerField(source='product_id', read_only=True)
    name = serializers.CharField(source='product.name', read_only=True)

    class Meta:
        model = OrderItem
        fields = ['productId', 'name', 'quantity', 'price', 'amount']


class OrderSerializer(serializers.ModelSerializer):
    """Serializer for order detail"""
    items = OrderItemSerializer(many=True, read_only=True)
    orderNo = serializers.CharField(source='roid', read_only=True)
    statusText = serializers.CharField(source='get_status_display', read_only=True)
    createTime = serializers.DateTimeField(source='create_time', format='%Y-%m-%d %H:%M:%S', read_only=True)
    completeTime = serializers.DateTimeField(source='complete_time', format='%Y-%m-%d %H:%M:%S', read_only=True)

    class Meta:
        model = Order
        fields = [
            'orderNo', 'uid', 'amount', 'status', 'statusText',
            'createTime', 'completeTime', 'remark', 'items'
        ]
        read_only_fields = fields


class OrderItemCreateSerializer(serializers.Serializer):
    product_id = serializers.IntegerField()
    quantity = serializers.IntegerField(validators=[validate_quantity])


class OrderCreateSerializer(serializers.Serializer):
    """Payload for POST /api/order/createOrder"""
    items = OrderItemCreateSerializer(many=True, allow_empty=False)
    remark = serializers.CharField(required=False, allow_blank=True, default='')


class OrderCompleteSerializer(serializers.Serializer):
    roid = serializers.CharField(max_length=50)
