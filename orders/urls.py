from django.urls import path
from .views import (
    CustomerOrdersView,
    CustomerRevenueView,
    OrderDetailView,
    OrderFilterView,
    OrderListView,
    OrderStatusView,
)

urlpatterns = [
    path("", OrderListView.as_view(), name="order-list"),
    path("filter/", OrderFilterView.as_view(), name="order-filter"),
    path("<int:order_id>/", OrderDetailView.as_view(), name="order-detail"),
    path("<int:order_id>/status/", OrderStatusView.as_view(), name="order-status"),
    path("customer/<int:customer_id>/", CustomerOrdersView.as_view(), name="customer-orders"),
    path("customer/<int:customer_id>/revenue/", CustomerRevenueView.as_view(), name="customer-revenue"),
]
