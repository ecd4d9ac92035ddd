from django.urls import path
from . import views

urlpatterns = [
    path('createOrder', views.CreateOrderView.as_view(), name='create-order'),
    path('getMyOrder', views.GetMyOrderView.as_view(), name='get-my-order'),
    path('completeOrder', views.CompleteOrderView.as_view(), name='complete-order'),
]
