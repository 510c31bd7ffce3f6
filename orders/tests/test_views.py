from datetime import datetime, timezone
from decimal import Decimal

from django.test import TestCase
from rest_framework.test import APIClient

from catalog.models import Product
from customers.models import Customer
from orders.models import Order, OrderStatus
from storefront.permissions import ROLE_ADMIN, ROLE_USER
from storefront.testing import user_with_roles


class OrderEndpointTestCase(TestCase):
    """
    Tests for /api/orders/

    Each test runs inside a transaction that is rolled back automatically.
    The caller is authenticated upfront; only the role set varies.
    """

    def setUp(self):
        self.client = APIClient()
        self.client.force_authenticate(user=user_with_roles("shopper", ROLE_USER))
        self.admin = user_with_roles("manager", ROLE_ADMIN)

        self.customer = Customer.objects.create(
            username="johndoe", email="john.doe@example.com", first_name="John", last_name="Doe",
        )
        self.laptop = Product.objects.create(name="Laptop", price=Decimal("999.99"), stock_quantity=50)
        self.mouse = Product.objects.create(name="Mouse", price=Decimal("29.99"), stock_quantity=200)

    def as_admin(self):
        self.client.force_authenticate(user=self.admin)

    def create_order(self, product_ids=None):
        return self.client.post("/api/orders/", {
            "customer_id": self.customer.id,
            "product_ids": product_ids or [self.laptop.id, self.mouse.id],
        }, format="json")


class CreateOrderEndpointTest(OrderEndpointTestCase):
    def test_successful_creation(self):
        response = self.create_order()

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data["customer_id"], self.customer.id)
        self.assertEqual(response.data["product_ids"], [self.laptop.id, self.mouse.id])
        self.assertEqual(Decimal(response.data["total_amount"]), Decimal("1029.98"))
        self.assertEqual(response.data["status"], "PENDING")
        self.assertEqual(Order.objects.count(), 1)

    def test_client_supplied_total_and_status_are_ignored(self):
        response = self.client.post("/api/orders/", {
            "customer_id": self.customer.id,
            "product_ids": [self.mouse.id],
            "total_amount": "0.01",
            "status": "DELIVERED",
        }, format="json")

        self.assertEqual(response.status_code, 201)
        self.assertEqual(Decimal(response.data["total_amount"]), Decimal("29.99"))
        self.assertEqual(response.data["status"], "PENDING")

    def test_unknown_customer_returns_404(self):
        response = self.client.post("/api/orders/", {
            "customer_id": 99999,
            "product_ids": [self.laptop.id],
        }, format="json")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(Order.objects.count(), 0)

    def test_unknown_product_returns_404(self):
        response = self.create_order([self.laptop.id, 99999])

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data["error"], "One or more products not found")
        self.assertEqual(Order.objects.count(), 0)

    def test_empty_product_ids_returns_400(self):
        response = self.client.post("/api/orders/", {
            "customer_id": self.customer.id,
            "product_ids": [],
        }, format="json")

        self.assertEqual(response.status_code, 400)

    def test_missing_customer_returns_400(self):
        response = self.client.post("/api/orders/", {"product_ids": [self.laptop.id]}, format="json")

        self.assertEqual(response.status_code, 400)


class ReadOrderEndpointTest(OrderEndpointTestCase):
    def setUp(self):
        super().setUp()
        self.order_id = self.create_order().data["id"]

    def test_get_order(self):
        response = self.client.get(f"/api/orders/{self.order_id}/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["id"], self.order_id)

    def test_get_missing_order_returns_404(self):
        response = self.client.get("/api/orders/99999/")

        self.assertEqual(response.status_code, 404)

    def test_list_orders_is_paginated(self):
        self.create_order([self.mouse.id])

        response = self.client.get("/api/orders/", {"page": 2, "size": 1})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["total_elements"], 2)
        self.assertEqual(response.data["total_pages"], 2)
        self.assertEqual(response.data["page"], 2)
        self.assertEqual(len(response.data["content"]), 1)

    def test_invalid_page_returns_400(self):
        self.assertEqual(self.client.get("/api/orders/", {"page": 0}).status_code, 400)
        self.assertEqual(self.client.get("/api/orders/", {"size": "many"}).status_code, 400)

    def test_list_orders_sorted_by_total(self):
        cheap_id = self.create_order([self.mouse.id]).data["id"]

        ascending = self.client.get("/api/orders/", {"sort": "total_amount,asc"})
        descending = self.client.get("/api/orders/", {"sort": "total_amount,desc"})

        self.assertEqual([o["id"] for o in ascending.data["content"]], [cheap_id, self.order_id])
        self.assertEqual([o["id"] for o in descending.data["content"]], [self.order_id, cheap_id])

    def test_sort_by_unlisted_field_returns_400(self):
        response = self.client.get("/api/orders/", {"sort": "customer__email"})

        self.assertEqual(response.status_code, 400)

    def test_customer_orders(self):
        response = self.client.get(f"/api/orders/customer/{self.customer.id}/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual([o["id"] for o in response.data["content"]], [self.order_id])

    def test_filter_without_parameters_returns_all(self):
        self.create_order([self.mouse.id])

        response = self.client.get("/api/orders/filter/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["total_elements"], 2)

    def test_filter_by_customer_and_status(self):
        Order.objects.filter(id=self.order_id).update(status=OrderStatus.SHIPPED)
        self.create_order([self.mouse.id])

        response = self.client.get("/api/orders/filter/", {
            "customer_id": self.customer.id,
            "status": "SHIPPED",
        })

        self.assertEqual(response.status_code, 200)
        self.assertEqual([o["id"] for o in response.data["content"]], [self.order_id])

    def test_filter_with_unknown_status_returns_400(self):
        response = self.client.get("/api/orders/filter/", {"status": "LOST"})

        self.assertEqual(response.status_code, 400)


class UpdateOrderStatusEndpointTest(OrderEndpointTestCase):
    def setUp(self):
        super().setUp()
        self.order_id = self.create_order().data["id"]

    def test_admin_updates_status(self):
        self.as_admin()

        response = self.client.patch(f"/api/orders/{self.order_id}/status/", {"status": "SHIPPED"}, format="json")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["status"], "SHIPPED")
        self.assertEqual(self.client.get(f"/api/orders/{self.order_id}/").data["status"], "SHIPPED")

    def test_status_from_query_parameter(self):
        self.as_admin()

        response = self.client.patch(f"/api/orders/{self.order_id}/status/?status=DELIVERED")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["status"], "DELIVERED")

    def test_invalid_status_returns_400(self):
        self.as_admin()

        response = self.client.patch(f"/api/orders/{self.order_id}/status/", {"status": "LOST"}, format="json")

        self.assertEqual(response.status_code, 400)

    def test_missing_order_returns_404(self):
        self.as_admin()

        response = self.client.patch("/api/orders/99999/status/", {"status": "SHIPPED"}, format="json")

        self.assertEqual(response.status_code, 404)

    def test_user_role_cannot_update_status(self):
        response = self.client.patch(f"/api/orders/{self.order_id}/status/", {"status": "SHIPPED"}, format="json")

        self.assertEqual(response.status_code, 403)
        self.assertEqual(Order.objects.get(id=self.order_id).status, OrderStatus.PENDING)


class DeleteOrderEndpointTest(OrderEndpointTestCase):
    def setUp(self):
        super().setUp()
        self.order_id = self.create_order().data["id"]

    def test_admin_deletes_order(self):
        self.as_admin()

        response = self.client.delete(f"/api/orders/{self.order_id}/")

        self.assertEqual(response.status_code, 204)
        self.assertEqual(self.client.get(f"/api/orders/{self.order_id}/").status_code, 404)

    def test_delete_missing_order_returns_404(self):
        self.as_admin()

        self.assertEqual(self.client.delete("/api/orders/99999/").status_code, 404)

    def test_user_role_cannot_delete(self):
        response = self.client.delete(f"/api/orders/{self.order_id}/")

        self.assertEqual(response.status_code, 403)
        self.assertTrue(Order.objects.filter(id=self.order_id).exists())


class CustomerRevenueEndpointTest(OrderEndpointTestCase):
    def test_revenue_per_year(self):
        for total in ("499.99", "750.00", "500.00"):
            order = Order.objects.create(
                customer=self.customer, product_ids=[self.laptop.id], total_amount=Decimal(total),
            )
            Order.objects.filter(pk=order.pk).update(created_at=datetime(2024, 4, 2, tzinfo=timezone.utc))

        response = self.client.get(f"/api/orders/customer/{self.customer.id}/revenue/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.data), 1)
        self.assertEqual(response.data[0]["customer_id"], self.customer.id)
        self.assertEqual(response.data[0]["year"], 2024)
        self.assertEqual(Decimal(response.data[0]["total_revenue"]), Decimal("1749.99"))

    def test_customer_without_orders_returns_empty_list(self):
        other = Customer.objects.create(
            username="janedoe", email="jane.doe@example.com", first_name="Jane", last_name="Doe",
        )

        response = self.client.get(f"/api/orders/customer/{other.id}/revenue/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data, [])

    def test_unknown_customer_returns_404(self):
        response = self.client.get("/api/orders/customer/99999/revenue/")

        self.assertEqual(response.status_code, 404)


class OrderAccessTest(TestCase):
    def test_anonymous_request_is_rejected(self):
        response = APIClient().get("/api/orders/")

        self.assertIn(response.status_code, (401, 403))

    def test_user_without_role_is_forbidden(self):
        client = APIClient()
        client.force_authenticate(user=user_with_roles("nobody"))

        self.assertEqual(client.get("/api/orders/").status_code, 403)
