from decimal import Decimal

from django.test import TestCase
from rest_framework.test import APIClient

from catalog.application.use_cases import find_products_by_ids
from catalog.models import Product
from storefront.permissions import ROLE_ADMIN, ROLE_USER
from storefront.testing import user_with_roles


class FindProductsByIdsTest(TestCase):
    def test_drops_unknown_ids_and_duplicates(self):
        laptop = Product.objects.create(name="Laptop", price=Decimal("999.99"), stock_quantity=1)

        found = find_products_by_ids([laptop.id, laptop.id, 99999])

        self.assertEqual([p.id for p in found], [laptop.id])


class ProductEndpointTest(TestCase):
    """Tests for /api/products/"""

    def setUp(self):
        self.client = APIClient()
        self.client.force_authenticate(user=user_with_roles("manager", ROLE_ADMIN))
        self.laptop = Product.objects.create(
            name="Laptop", description="High-performance laptop",
            price=Decimal("999.99"), stock_quantity=50, category="Electronics",
        )
        self.mouse = Product.objects.create(
            name="Mouse", description="Wireless mouse",
            price=Decimal("29.99"), stock_quantity=200, category="Electronics",
        )
        self.chair = Product.objects.create(
            name="Desk Chair", description="Ergonomic office chair",
            price=Decimal("249.99"), stock_quantity=30, category="Furniture",
        )

    def test_create_product(self):
        response = self.client.post("/api/products/", {
            "name": "Monitor",
            "price": "199.50",
            "stock_quantity": 10,
            "category": "Electronics",
        }, format="json")

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data["price"], "199.50")

    def test_negative_price_returns_400(self):
        response = self.client.post("/api/products/", {
            "name": "Broken",
            "price": "-1.00",
            "stock_quantity": 1,
        }, format="json")

        self.assertEqual(response.status_code, 400)

    def test_list_products(self):
        response = self.client.get("/api/products/", {"size": 2})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["total_elements"], 3)
        self.assertEqual(len(response.data["content"]), 2)

    def test_search_matches_description_case_insensitively(self):
        response = self.client.get("/api/products/search/", {"query": "WIRELESS"})

        self.assertEqual([p["name"] for p in response.data["content"]], ["Mouse"])

    def test_filter_by_category_and_price_range(self):
        response = self.client.get("/api/products/filter/", {
            "category": "Electronics",
            "min_price": "29.99",
            "max_price": "500",
        })

        self.assertEqual(response.status_code, 200)
        self.assertEqual([p["name"] for p in response.data["content"]], ["Mouse"])

    def test_filter_without_parameters_returns_all(self):
        response = self.client.get("/api/products/filter/")

        self.assertEqual(response.data["total_elements"], 3)

    def test_update_product(self):
        response = self.client.put(f"/api/products/{self.mouse.id}/", {
            "name": "Mouse",
            "price": "24.99",
            "stock_quantity": 150,
        }, format="json")

        self.assertEqual(response.status_code, 200)
        self.mouse.refresh_from_db()
        self.assertEqual(self.mouse.price, Decimal("24.99"))

    def test_missing_product_returns_404(self):
        self.assertEqual(self.client.get("/api/products/99999/").status_code, 404)
        self.assertEqual(self.client.delete("/api/products/99999/").status_code, 404)

    def test_delete_product(self):
        response = self.client.delete(f"/api/products/{self.chair.id}/")

        self.assertEqual(response.status_code, 204)
        self.assertFalse(Product.objects.filter(id=self.chair.id).exists())

    def test_user_role_reads_but_cannot_write(self):
        self.client.force_authenticate(user=user_with_roles("shopper", ROLE_USER))

        self.assertEqual(self.client.get(f"/api/products/{self.laptop.id}/").status_code, 200)
        self.assertEqual(self.client.delete(f"/api/products/{self.laptop.id}/").status_code, 403)
