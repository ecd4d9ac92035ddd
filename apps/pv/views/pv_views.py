"""
PV display and ledger views.
"""
from django.contrib.auth import get_user_model
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAdminUser, IsAuthenticated

from apps.cart.models import Cart
from apps.cart.services import CartService
from apps.common.utils import error_response, success_response
from apps.products.models import Product
from ..models import PVLedger
from ..serializers import (
    CartPVRowSerializer, DiscountTierSerializer, PVDashboardSerializer, PVLedgerSerializer
)
from ..services import PVDisplayService
from ..tiers import get_tier_table


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_product_pv(request, id):
    """PV badge of a product; data is null when the product has no PV"""
    product = Product.objects.filter(id=id, status=Product.STATUS_ACTIVE).first()
    if product is None:
        return error_response('Product not found', status_code=status.HTTP_404_NOT_FOUND)
    return success_response(PVDisplayService.product_pv(product))


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_pv_dashboard(request):
    """Current user's monthly PV, discount and expiry date"""
    cart = Cart.objects.filter(user=request.user).first()
    summary = PVDisplayService.dashboard(request.user, cart=cart)
    return success_response(PVDashboardSerializer(summary).data)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_cart_pv(request):
    """Total PV row of the current user's cart; null for non-distributors"""
    cart = CartService.get_or_create_cart(request.user)
    row = PVDisplayService.cart_pv_row(cart, request.user)
    return success_response(CartPVRowSerializer(row).data if row else None)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_discount_tiers(request):
    """Discount tier table with any uncovered PV ranges"""
    table = get_tier_table()
    return success_response({
        'tiers': DiscountTierSerializer(table.to_list(), many=True).data,
        'gaps': [{'after': str(after), 'up_to': str(up_to)} for after, up_to in table.gaps()],
    })


@api_view(['GET'])
@permission_classes([IsAdminUser])
def get_user_ledger(request, user_id):
    """A user's PV ledger and recent accruals (staff only)"""
    if not get_user_model().objects.filter(pk=user_id).exists():
        return error_response('User not found', status_code=status.HTTP_404_NOT_FOUND)

    ledger = PVLedger.objects.select_related('user').filter(user_id=user_id).first()
    if ledger is None:
        return success_response(None, 'User has no PV ledger')
    return success_response(PVLedgerSerializer(ledger).data)
