from django.urls import path
from .views import CustomerDetailView, CustomerListView, CustomerSearchView

urlpatterns = [
    path("", CustomerListView.as_view(), name="customer-list"),
    path("search/", CustomerSearchView.as_view(), name="customer-search"),
    path("<int:customer_id>/", CustomerDetailView.as_view(), name="customer-detail"),
]
