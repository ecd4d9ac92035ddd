"""
Order creation and query views.
"""
import logging

from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated

from apps.common.utils import success_response, error_response
from ..serializers import OrderSerializer, OrderCreateSerializer
from ..services import OrderService

logger = logging.getLogger(__name__)


class CreateOrderView(APIView):
    """Create order endpoint - POST /api/order/createOrder"""
    permission_classes = [IsAuthenticated]

    def post(self, request):
        serializer = OrderCreateSerializer(data=request.data)
        if not serializer.is_valid():
            logger.error(f"Serializer validation failed: {serializer.errors}")
            return error_response("Invalid order data", serializer.errors)

        data = serializer.validated_data
        order, error_msg = OrderService.create_order(request.user, data['items'], data['remark'])
        if not order:
            logger.error(f"Order creation failed: {error_msg}")
            return error_response(error_msg)

        return success_response(OrderSerializer(order).data, "Order created successfully")


class GetMyOrderView(APIView):
    """Current user's orders - GET /api/order/getMyOrder"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        orders = OrderService.get_user_orders(request.user)
        return success_response({'list': OrderSerializer(orders, many=True).data})
