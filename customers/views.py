"""
API Layer — Customer endpoints (Django REST Framework)

Thin controllers: validate input with the serializer, delegate to the use
cases, translate domain exceptions into HTTP responses.
"""

from rest_framework import status
from rest_framework.generics import GenericAPIView
from rest_framework.response import Response
from rest_framework.schemas.openapi import AutoSchema

from customers.application import use_cases
from customers.serializers import CustomerSerializer
from storefront.domain.exceptions import DuplicateResource, ResourceInUse, ResourceNotFound
from storefront.pagination import PageRequest
from storefront.permissions import CatalogPermission


class CustomerView(GenericAPIView):
    serializer_class = CustomerSerializer
    permission_classes = [CatalogPermission]
    sortable_fields = ("id", "username", "email", "first_name", "last_name", "created_at")


class CustomerListView(CustomerView):
    """
    GET  /api/customers/
    POST /api/customers/
    """

    schema = AutoSchema(tags=["Customers"], operation_id_base="Customer")

    def get(self, request):
        page_request = PageRequest.from_query_params(request.query_params, self.sortable_fields)
        page = use_cases.list_customers(page_request)
        return Response(page.to_dict(lambda c: CustomerSerializer(c).data))

    def post(self, request):
        serializer = CustomerSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            customer = use_cases.create_customer(serializer.validated_data)
        except DuplicateResource as exc:
            return Response({"error": str(exc)}, status=status.HTTP_409_CONFLICT)

        return Response(CustomerSerializer(customer).data, status=status.HTTP_201_CREATED)


class CustomerSearchView(CustomerView):
    """GET /api/customers/search/?query="""

    schema = AutoSchema(tags=["Customers"], operation_id_base="CustomerSearch")

    def get(self, request):
        query = request.query_params.get("query")
        if not query:
            return Response(
                {"error": "query is required."},
                status=status.HTTP_400_BAD_REQUEST,
            )

        page_request = PageRequest.from_query_params(request.query_params, self.sortable_fields)
        page = use_cases.search_customers(query, page_request)
        return Response(page.to_dict(lambda c: CustomerSerializer(c).data))


class CustomerDetailView(CustomerView):
    """
    GET    /api/customers/<id>/
    PUT    /api/customers/<id>/
    DELETE /api/customers/<id>/
    """

    schema = AutoSchema(tags=["Customers"], operation_id_base="CustomerDetail")

    def get(self, request, customer_id):
        try:
            customer = use_cases.get_customer(customer_id)
        except ResourceNotFound as exc:
            return Response({"error": str(exc)}, status=status.HTTP_404_NOT_FOUND)

        return Response(CustomerSerializer(customer).data)

    def put(self, request, customer_id):
        serializer = CustomerSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            customer = use_cases.update_customer(customer_id, serializer.validated_data)
        except ResourceNotFound as exc:
            return Response({"error": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        except DuplicateResource as exc:
            return Response({"error": str(exc)}, status=status.HTTP_409_CONFLICT)

        return Response(CustomerSerializer(customer).data)

    def delete(self, request, customer_id):
        try:
            use_cases.delete_customer(customer_id)
        except ResourceNotFound as exc:
            return Response({"error": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        except ResourceInUse as exc:
            return Response({"error": str(exc)}, status=status.HTTP_409_CONFLICT)

        return Response(status=status.HTTP_204_NO_CONTENT)
