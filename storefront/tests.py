from django.http import QueryDict
from django.test import TestCase
from rest_framework.exceptions import ValidationError
from rest_framework.test import APIClient

from storefront.pagination import PageRequest
from storefront.permissions import ROLE_ADMIN, ROLE_USER, roles_of
from storefront.testing import user_with_roles


class ApiDocsTest(TestCase):
    def test_schema_is_public_and_lists_every_resource(self):
        response = APIClient().get("/api-docs/", {"format": "openapi-json"})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["info"]["title"], "Storefront REST API")
        paths = response.data["paths"]
        for path in (
            "/api/orders/",
            "/api/orders/customer/{customer_id}/revenue/",
            "/api/products/",
            "/api/customers/",
        ):
            self.assertIn(path, paths)


class RolesTest(TestCase):
    def test_roles_come_from_groups(self):
        user = user_with_roles("alice", "user")

        self.assertEqual(roles_of(user), {ROLE_USER})

    def test_superuser_is_admin(self):
        user = user_with_roles("root")
        user.is_superuser = True

        self.assertIn(ROLE_ADMIN, roles_of(user))


class PageRequestTest(TestCase):
    def test_defaults(self):
        self.assertEqual(PageRequest.from_query_params({}), PageRequest(number=1, size=10))

    def test_sort_fields_and_directions(self):
        params = QueryDict("sort=total_amount,desc&sort=created_at")

        page_request = PageRequest.from_query_params(params, ("total_amount", "created_at"))

        self.assertEqual(page_request.sort, ("-total_amount", "created_at"))

    def test_sort_outside_whitelist_is_rejected(self):
        with self.assertRaises(ValidationError):
            PageRequest.from_query_params(QueryDict("sort=password"), ("id",))

    def test_sort_direction_must_be_asc_or_desc(self):
        with self.assertRaises(ValidationError):
            PageRequest.from_query_params(QueryDict("sort=id,sideways"), ("id",))

    def test_size_is_bounded(self):
        with self.assertRaises(ValidationError):
            PageRequest.from_query_params({"size": "1000"})
