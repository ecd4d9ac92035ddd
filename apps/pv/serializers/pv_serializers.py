from rest_framework import serializers

from ..models import PVAccrual, PVLedger


class PVAccrualSerializer(serializers.ModelSerializer):
    order = serializers.CharField(source='order.roid', read_only=True)

    class Meta:
        model = PVAccrual
        fields = ['id', 'order', 'pv', 'created_at']


class PVLedgerSerializer(serializers.ModelSerializer):
    user_id = serializers.IntegerField(read_only=True)
    username = serializers.CharField(source='user.username', read_only=True)
    recent_accruals = serializers.SerializerMethodField()

    class Meta:
        model = PVLedger
        fields = [
            'user_id', 'username', 'monthly_pv', 'last_pv_order',
            'reset_period', 'updated_at', 'recent_accruals'
        ]

    def get_recent_accruals(self, obj):
        accruals = obj.user.pv_accruals.select_related('order')[:10]
        return PVAccrualSerializer(accruals, many=True).data


class PVDashboardSerializer(serializers.Serializer):
    """Account dashboard PV summary"""
    current_pv = serializers.CharField()
    current_pv_label = serializers.CharField()
    discount_percent = serializers.IntegerField()
    discount_label = serializers.CharField()
    expires_on = serializers.DateField()
    expiry_label = serializers.CharField()
    last_pv_order = serializers.DateTimeField(allow_null=True)
    next_reset_at = serializers.DateTimeField()
    is_distributor = serializers.BooleanField()


class CartPVRowSerializer(serializers.Serializer):
    label = serializers.CharField()
    value = serializers.CharField()
    discount_percent = serializers.IntegerField()
    source = serializers.CharField()


class DiscountTierSerializer(serializers.Serializer):
    lower_exclusive = serializers.CharField()
    upper_inclusive = serializers.CharField(allow_null=True)
    percent = serializers.IntegerField()
