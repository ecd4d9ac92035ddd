"""
Product list, detail and PV views.
"""
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated, IsAdminUser
from rest_framework import status
from django.db.models import Q

from apps.common.utils import success_response, error_response
from ..models import Product
from ..serializers import ProductListSerializer, ProductDetailSerializer, ProductPVUpdateSerializer
from ..services import ProductPVService


class ProductListView(APIView):
    """Product list endpoint - GET /api/products/"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        keyword = request.GET.get('keyword', '')
        try:
            page = max(int(request.GET.get('page', 1)), 1)
            page_size = max(int(request.GET.get('pageSize', 20)), 1)
        except ValueError:
            return error_response('page and pageSize must be integers')

        query = Q(status=Product.STATUS_ACTIVE)
        if keyword:
            query &= Q(name__icontains=keyword) | Q(description__icontains=keyword)

        products = Product.objects.filter(query).order_by('-create_time')

        total = products.count()
        start_index = (page - 1) * page_size
        page_products = products[start_index:start_index + page_size]

        response_data = {
            "list": ProductListSerializer(page_products, many=True).data,
            "page": {
                "pageNum": page,
                "pageSize": page_size,
                "total": total,
                "totalPages": (total + page_size - 1) // page_size
            }
        }
        return success_response(response_data, 'Products retrieved successfully')


class ProductDetailView(APIView):
    """Product detail endpoint - GET /api/products/{id}/"""
    permission_classes = [IsAuthenticated]

    def get(self, request, id):
        product = Product.objects.select_related('category').filter(id=id).first()
        if product is None:
            return error_response('Product not found', status_code=status.HTTP_404_NOT_FOUND)
        return success_response(ProductDetailSerializer(product).data)


class ProductPVView(APIView):
    """Set a product's point value - POST /api/products/{id}/pv/ (staff only)"""
    permission_classes = [IsAdminUser]

    def post(self, request, id):
        serializer = ProductPVUpdateSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Invalid point value', serializer.errors)

        try:
            product = ProductPVService.set_pv(id, serializer.validated_data['custom_pv'])
        except Product.DoesNotExist:
            return error_response('Product not found', status_code=status.HTTP_404_NOT_FOUND)

        return success_response(
            {'id': product.id, 'pv': product.pv},
            'Point value updated successfully'
        )
