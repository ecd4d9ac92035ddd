from django.urls import path
from . import views

urlpatterns = [
    path('items/<int:item_id>/', views.CartItemDetailView.as_view(), name='cart-item-detail'),
    path('items/', views.CartItemView.as_view(), name='cart-items'),
    path('', views.CartView.as_view(), name='cart'),
]
