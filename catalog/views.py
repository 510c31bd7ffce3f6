"""
API Layer — Product endpoints (Django REST Framework)
"""

from rest_framework import status
from rest_framework.generics import GenericAPIView
from rest_framework.response import Response
from rest_framework.schemas.openapi import AutoSchema

from catalog.application import use_cases
from catalog.serializers import ProductFilterSerializer, ProductSerializer
from storefront.domain.exceptions import ResourceNotFound
from storefront.pagination import PageRequest
from storefront.permissions import CatalogPermission


def _page_response(page):
    return Response(page.to_dict(lambda p: ProductSerializer(p).data))


class ProductView(GenericAPIView):
    serializer_class = ProductSerializer
    permission_classes = [CatalogPermission]
    sortable_fields = ("id", "name", "price", "stock_quantity", "category", "created_at")


class ProductListView(ProductView):
    """
    GET  /api/products/
    POST /api/products/
    """

    schema = AutoSchema(tags=["Products"], operation_id_base="Product")

    def get(self, request):
        return _page_response(
            use_cases.list_products(
                PageRequest.from_query_params(request.query_params, self.sortable_fields)
            )
        )

    def post(self, request):
        serializer = ProductSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        product = use_cases.create_product(serializer.validated_data)
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)


class ProductSearchView(ProductView):
    """GET /api/products/search/?query="""

    schema = AutoSchema(tags=["Products"], operation_id_base="ProductSearch")

    def get(self, request):
        query = request.query_params.get("query")
        if not query:
            return Response(
                {"error": "query is required."},
                status=status.HTTP_400_BAD_REQUEST,
            )

        return _page_response(
            use_cases.search_products(
                query,
                PageRequest.from_query_params(request.query_params, self.sortable_fields),
            )
        )


class ProductFilterView(ProductView):
    """GET /api/products/filter/?category=&min_price=&max_price="""

    schema = AutoSchema(tags=["Products"], operation_id_base="ProductFilter")

    def get(self, request):
        filters = ProductFilterSerializer(data=request.query_params)
        filters.is_valid(raise_exception=True)

        return _page_response(
            use_cases.filter_products(
                page_request=PageRequest.from_query_params(request.query_params, self.sortable_fields),
                **filters.validated_data,
            )
        )


class ProductDetailView(ProductView):
    """
    GET    /api/products/<id>/
    PUT    /api/products/<id>/
    DELETE /api/products/<id>/
    """

    schema = AutoSchema(tags=["Products"], operation_id_base="ProductDetail")

    def get(self, request, product_id):
        try:
            product = use_cases.get_product(product_id)
        except ResourceNotFound as exc:
            return Response({"error": str(exc)}, status=status.HTTP_404_NOT_FOUND)

        return Response(ProductSerializer(product).data)

    def put(self, request, product_id):
        serializer = ProductSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            product = use_cases.update_product(product_id, serializer.validated_data)
        except ResourceNotFound as exc:
            return Response({"error": str(exc)}, status=status.HTTP_404_NOT_FOUND)

        return Response(ProductSerializer(product).data)

    def delete(self, request, product_id):
        try:
            use_cases.delete_product(product_id)
        except ResourceNotFound as exc:
            return Response({"error": str(exc)}, status=status.HTTP_404_NOT_FOUND)

        return Response(status=status.HTTP_204_NO_CONTENT)
