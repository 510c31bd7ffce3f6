"""
Application Use Cases — Customers

Each operation runs in its own transaction.atomic() block. Uniqueness of
username and email is checked explicitly so callers get a DuplicateResource
instead of a raw IntegrityError; the UNIQUE constraints remain the final
guard.
"""

import logging

from django.db import transaction
from django.db.models import ProtectedError, Q

from customers.models import Customer
from storefront.domain.exceptions import DuplicateResource, ResourceInUse, ResourceNotFound
from storefront.pagination import paginate

logger = logging.getLogger(__name__)


def customer_exists(customer_id):
    return Customer.objects.filter(id=customer_id).exists()


def _load(customer_id):
    try:
        return Customer.objects.get(id=customer_id)
    except Customer.DoesNotExist:
        raise ResourceNotFound("Customer", customer_id)


def list_customers(page_request):
    with transaction.atomic():
        return paginate(Customer.objects.all(), page_request)


def get_customer(customer_id):
    with transaction.atomic():
        return _load(customer_id)


def search_customers(query, page_request):
    """Case-insensitive match on username, email, first name or last name."""
    with transaction.atomic():
        matches = Customer.objects.filter(
            Q(username__icontains=query)
            | Q(email__icontains=query)
            | Q(first_name__icontains=query)
            | Q(last_name__icontains=query)
        )
        return paginate(matches, page_request)


def create_customer(data):
    with transaction.atomic():
        if Customer.objects.filter(username=data["username"]).exists():
            raise DuplicateResource(f"Username already exists: {data['username']}")
        if Customer.objects.filter(email=data["email"]).exists():
            raise DuplicateResource(f"Email already exists: {data['email']}")

        customer = Customer.objects.create(**data)

    logger.info("Customer created: id=%s username=%s", customer.id, customer.username)
    return customer


def update_customer(customer_id, data):
    with transaction.atomic():
        customer = _load(customer_id)

        username = data.get("username", customer.username)
        email = data.get("email", customer.email)

        # Only re-check uniqueness for values that actually change
        if username != customer.username and Customer.objects.filter(username=username).exists():
            raise DuplicateResource(f"Username already exists: {username}")
        if email != customer.email and Customer.objects.filter(email=email).exists():
            raise DuplicateResource(f"Email already exists: {email}")

        for attr, value in data.items():
            setattr(customer, attr, value)
        customer.save()

    return customer


def delete_customer(customer_id):
    with transaction.atomic():
        customer = _load(customer_id)
        try:
            customer.delete()
        except ProtectedError:
            logger.warning("Customer %s still owns orders; delete refused", customer_id)
            raise ResourceInUse("Customer", customer_id)

    logger.info("Customer deleted: id=%s", customer_id)
