"""
Cart views.
"""
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView

from apps.common.utils import success_response, error_response
from ..serializers import CartItemSerializer, CartItemUpdateSerializer, CartTotalsSerializer
from ..services import CartService


def _cart_payload(cart, user):
    totals = CartService.calculate_totals(cart, user)
    return {
        'items': CartItemSerializer(cart.items.select_related('product'), many=True).data,
        'totals': CartTotalsSerializer(totals).data,
    }


class CartView(APIView):
    """Cart contents and totals - GET /api/cart/"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        cart = CartService.get_or_create_cart(request.user)
        return success_response(_cart_payload(cart, request.user))


class CartItemView(APIView):
    """Add or update a cart line - POST /api/cart/items/"""
    permission_classes = [IsAuthenticated]

    def post(self, request):
        serializer = CartItemUpdateSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Invalid cart item', serializer.errors)

        cart = CartService.get_or_create_cart(request.user)
        _, error_msg = CartService.set_item(
            cart,
            serializer.validated_data['product_id'],
            serializer.validated_data['quantity'],
        )
        if error_msg:
            return error_response(error_msg, status_code=status.HTTP_404_NOT_FOUND)

        return success_response(_cart_payload(cart, request.user), 'Cart updated')


class CartItemDetailView(APIView):
    """Remove a cart line - DELETE /api/cart/items/{id}/"""
    permission_classes = [IsAuthenticated]

    def delete(self, request, item_id):
        cart = CartService.get_or_create_cart(request.user)
        if not CartService.remove_item(cart, item_id):
            return error_response('Cart item not found', status_code=status.HTTP_404_NOT_FOUND)
        return success_response(_cart_payload(cart, request.user), 'Item removed')
