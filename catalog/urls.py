from django.urls import path
from .views import ProductDetailView, ProductFilterView, ProductListView, ProductSearchView

urlpatterns = [
    path("", ProductListView.as_view(), name="product-list"),
    path("search/", ProductSearchView.as_view(), name="product-search"),
    path("filter/", ProductFilterView.as_view(), name="product-filter"),
    path("<int:product_id>/", ProductDetailView.as_view(), name="product-detail"),
]
