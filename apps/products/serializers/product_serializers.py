"""
Product serializers for list, detail and PV update operations.
"""
from rest_framework import serializers

from apps.common.validators import validate_pv_value
from ..models import Product, Category


class CategorySerializer(serializers.ModelSerializer):
    class Meta:
        model = Category
        fields = ['id', 'name', 'parent', 'created_at']


class ProductListSerializer(serializers.ModelSerializer):
    """Serializer for product list view - GET /api/products/"""
    pv = serializers.DecimalField(max_digits=12, decimal_places=3, read_only=True, allow_null=True)
    createTime = serializers.DateTimeField(source='create_time', format='%Y-%m-%d %H:%M:%S', read_only=True)

    class Meta:
        model = Product
        fields = ['id', 'name', 'price', 'pv', 'status', 'createTime']


class ProductDetailSerializer(serializers.ModelSerializer):
    """Serializer for product detail view - GET /api/products/{id}/"""
    category = CategorySerializer(read_only=True)
    createTime = serializers.DateTimeField(source='create_time', format='%Y-%m-%d %H:%M:%S', read_only=True)
    updateTime = serializers.DateTimeField(source='update_time', format='%Y-%m-%d %H:%M:%S', read_only=True)

    class Meta:
        model = Product
        fields = [
            'id', 'name', 'price', 'pv', 'description', 'status',
            'inventory', 'category', 'createTime', 'updateTime'
        ]
        read_only_fields = fields


class ProductPVUpdateSerializer(serializers.Serializer):
    """Payload for POST /api/products/{id}/pv/"""
    custom_pv = serializers.DecimalField(
        max_digits=12, decimal_places=3, allow_null=True,
        validators=[validate_pv_value]
    )
