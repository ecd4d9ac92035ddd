from django.urls import path

from . import views

urlpatterns = [
    path('products/<int:id>/', views.get_product_pv, name='pv-product'),
    path('dashboard/', views.get_pv_dashboard, name='pv-dashboard'),
    path('cart/', views.get_cart_pv, name='pv-cart'),
    path('tiers/', views.get_discount_tiers, name='pv-tiers'),
    path('ledger/<int:user_id>/', views.get_user_ledger, name='pv-ledger'),
]
