from django.urls import path
from . import views

urlpatterns = [
    path('<int:id>/pv/', views.ProductPVView.as_view(), name='product-pv'),
    path('<int:id>/', views.ProductDetailView.as_view(), name='product-detail'),
    path('', views.ProductListView.as_view(), name='product-list'),
]
