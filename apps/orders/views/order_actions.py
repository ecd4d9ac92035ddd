"""
Order action views.
"""
from rest_framework.views import APIView
from rest_framework.permissions import IsAdminUser

from apps.common.utils import success_response, error_response
from ..serializers import OrderCompleteSerializer
from ..services import OrderService


class CompleteOrderView(APIView):
    """Mark an order completed - POST /api/order/completeOrder (staff only)"""
    permission_classes = [IsAdminUser]

    def post(self, request):
        serializer = OrderCompleteSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response("Invalid data", serializer.errors)

        success, message = OrderService.complete_order(serializer.validated_data['roid'])
        if success:
            return success_response({}, message)
        return error_response(message)
