from decimal import Decimal

from django.test import TestCase
from rest_framework.test import APIClient

from customers.models import Customer
from orders.models import Order
from storefront.permissions import ROLE_ADMIN, ROLE_USER
from storefront.testing import user_with_roles


class CustomerEndpointTest(TestCase):
    """Tests for /api/customers/"""

    def setUp(self):
        self.client = APIClient()
        self.client.force_authenticate(user=user_with_roles("manager", ROLE_ADMIN))
        self.john = Customer.objects.create(
            username="johndoe", email="john.doe@example.com", first_name="John", last_name="Doe",
        )

    def payload(self, **overrides):
        data = {
            "username": "janedoe",
            "email": "jane.doe@example.com",
            "first_name": "Jane",
            "last_name": "Doe",
        }
        data.update(overrides)
        return data

    def test_create_customer(self):
        response = self.client.post("/api/customers/", self.payload(), format="json")

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data["username"], "janedoe")
        self.assertEqual(Customer.objects.count(), 2)

    def test_duplicate_username_returns_409(self):
        response = self.client.post(
            "/api/customers/", self.payload(username="johndoe"), format="json",
        )

        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.data["error"], "Username already exists: johndoe")

    def test_duplicate_email_returns_409(self):
        response = self.client.post(
            "/api/customers/", self.payload(email="john.doe@example.com"), format="json",
        )

        self.assertEqual(response.status_code, 409)

    def test_invalid_email_returns_400(self):
        response = self.client.post("/api/customers/", self.payload(email="not-an-email"), format="json")

        self.assertEqual(response.status_code, 400)

    def test_get_and_missing(self):
        self.assertEqual(self.client.get(f"/api/customers/{self.john.id}/").data["username"], "johndoe")
        self.assertEqual(self.client.get("/api/customers/99999/").status_code, 404)

    def test_update_keeps_own_username(self):
        response = self.client.put(
            f"/api/customers/{self.john.id}/",
            self.payload(username="johndoe", email="john.doe@example.com", first_name="Johnny"),
            format="json",
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["first_name"], "Johnny")

    def test_update_to_taken_email_returns_409(self):
        Customer.objects.create(username="janedoe", email="jane.doe@example.com", first_name="Jane", last_name="Doe")

        response = self.client.put(
            f"/api/customers/{self.john.id}/",
            self.payload(username="johndoe", email="jane.doe@example.com"),
            format="json",
        )

        self.assertEqual(response.status_code, 409)

    def test_search(self):
        Customer.objects.create(username="janedoe", email="jane@example.com", first_name="Jane", last_name="Roe")

        response = self.client.get("/api/customers/search/", {"query": "ROE"})

        self.assertEqual(response.status_code, 200)
        self.assertEqual([c["username"] for c in response.data["content"]], ["janedoe"])

    def test_search_without_query_returns_400(self):
        self.assertEqual(self.client.get("/api/customers/search/").status_code, 400)

    def test_delete_customer(self):
        response = self.client.delete(f"/api/customers/{self.john.id}/")

        self.assertEqual(response.status_code, 204)
        self.assertFalse(Customer.objects.exists())

    def test_delete_customer_with_orders_returns_409(self):
        Order.objects.create(customer=self.john, product_ids=[1], total_amount=Decimal("1.00"))

        response = self.client.delete(f"/api/customers/{self.john.id}/")

        self.assertEqual(response.status_code, 409)
        self.assertTrue(Customer.objects.filter(id=self.john.id).exists())

    def test_user_role_reads_but_cannot_write(self):
        self.client.force_authenticate(user=user_with_roles("shopper", ROLE_USER))

        self.assertEqual(self.client.get("/api/customers/").status_code, 200)
        self.assertEqual(self.client.post("/api/customers/", self.payload(), format="json").status_code, 403)
        self.assertEqual(self.client.delete(f"/api/customers/{self.john.id}/").status_code, 403)
