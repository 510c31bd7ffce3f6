"""
API Layer — Order endpoints (Django REST Framework)

The views are thin controllers. Their responsibilities are limited to:

- Input validation and type coercion (serializers, page parameters)
- Delegation to the order workflow use cases
- Translation of domain exceptions into HTTP responses

No business rules live here. Transactions, existence checks and total
computation belong to orders.application.use_cases.
"""

from rest_framework import status
from rest_framework.generics import GenericAPIView
from rest_framework.response import Response
from rest_framework.schemas.openapi import AutoSchema

from orders.application import use_cases
from orders.serializers import (
    OrderCreateSerializer,
    OrderFilterSerializer,
    OrderSerializer,
    OrderStatusSerializer,
    RevenueRecordSerializer,
)
from storefront.domain.exceptions import ResourceNotFound
from storefront.pagination import PageRequest
from storefront.permissions import OrderPermission


def _not_found(exc):
    return Response({"error": str(exc)}, status=status.HTTP_404_NOT_FOUND)


def _page_response(page):
    return Response(page.to_dict(lambda order: OrderSerializer(order).data))


class OrderView(GenericAPIView):
    serializer_class = OrderSerializer
    permission_classes = [OrderPermission]
    sortable_fields = ("id", "created_at", "updated_at", "total_amount", "status")


class OrderListView(OrderView):
    """
    GET  /api/orders/
    POST /api/orders/

    POST body: {"customer_id": int, "product_ids": [int, ...]}. The total and
    the status are always set by the server.
    """

    schema = AutoSchema(tags=["Orders"], operation_id_base="Order")

    def get_serializer_class(self):
        if self.request is not None and self.request.method == "POST":
            return OrderCreateSerializer
        return OrderSerializer

    def get(self, request):
        return _page_response(
            use_cases.list_orders(
                PageRequest.from_query_params(request.query_params, self.sortable_fields)
            )
        )

    def post(self, request):
        serializer = OrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            order = use_cases.create_order(
                serializer.validated_data["customer_id"],
                serializer.validated_data["product_ids"],
            )
        except ResourceNotFound as exc:
            return _not_found(exc)

        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)


class OrderDetailView(OrderView):
    """
    GET    /api/orders/<id>/
    DELETE /api/orders/<id>/
    """

    schema = AutoSchema(tags=["Orders"], operation_id_base="OrderDetail")

    def get(self, request, order_id):
        try:
            order = use_cases.get_order(order_id)
        except ResourceNotFound as exc:
            return _not_found(exc)

        return Response(OrderSerializer(order).data)

    def delete(self, request, order_id):
        try:
            use_cases.delete_order(order_id)
        except ResourceNotFound as exc:
            return _not_found(exc)

        return Response(status=status.HTTP_204_NO_CONTENT)


class OrderStatusView(OrderView):
    """
    PATCH /api/orders/<id>/status/

    The new status comes from the body ({"status": "SHIPPED"}) or, when the
    body is empty, from the ?status= query parameter.
    """

    serializer_class = OrderStatusSerializer
    schema = AutoSchema(tags=["Orders"], operation_id_base="OrderStatus")

    def patch(self, request, order_id):
        serializer = OrderStatusSerializer(data=request.data or request.query_params)
        serializer.is_valid(raise_exception=True)

        try:
            order = use_cases.update_order_status(order_id, serializer.validated_data["status"])
        except ResourceNotFound as exc:
            return _not_found(exc)

        return Response(OrderSerializer(order).data)


class CustomerOrdersView(OrderView):
    """GET /api/orders/customer/<customer_id>/"""

    schema = AutoSchema(tags=["Orders"], operation_id_base="CustomerOrder")

    def get(self, request, customer_id):
        return _page_response(
            use_cases.list_customer_orders(
                customer_id,
                PageRequest.from_query_params(request.query_params, self.sortable_fields),
            )
        )


class OrderFilterView(OrderView):
    """GET /api/orders/filter/?customer_id=&status="""

    schema = AutoSchema(tags=["Orders"], operation_id_base="OrderFilter")

    def get(self, request):
        filters = OrderFilterSerializer(data=request.query_params)
        filters.is_valid(raise_exception=True)

        return _page_response(
            use_cases.filter_orders(
                customer_id=filters.validated_data.get("customer_id"),
                status=filters.validated_data.get("status"),
                page_request=PageRequest.from_query_params(request.query_params, self.sortable_fields),
            )
        )


class CustomerRevenueView(OrderView):
    """
    GET /api/orders/customer/<customer_id>/revenue/

    Returns [{"customer_id", "year", "total_revenue"}, ...] ascending by year.
    An existing customer without orders gets an empty list, not a 404.
    """

    serializer_class = RevenueRecordSerializer
    schema = AutoSchema(tags=["Orders"], operation_id_base="CustomerRevenue")

    def get(self, request, customer_id):
        try:
            records = use_cases.get_customer_revenue_per_year(customer_id)
        except ResourceNotFound as exc:
            return _not_found(exc)

        return Response(RevenueRecordSerializer(records, many=True).data)
