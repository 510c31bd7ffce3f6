from django.urls import include, path
from rest_framework.permissions import AllowAny
from rest_framework.schemas import get_schema_view

schema_view = get_schema_view(
    title="Storefront REST API",
    description="REST API for managing customers, products and orders.",
    version="1.0.0",
    public=True,
    permission_classes=[AllowAny],
)

urlpatterns = [
    path("api/customers/", include("customers.urls")),
    path("api/products/", include("catalog.urls")),
    path("api/orders/", include("orders.urls")),
    path("api-docs/", schema_view, name="openapi-schema"),
]
