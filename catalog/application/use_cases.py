"""
Application Use Cases — Catalog

Plain CRUD over products plus the batch lookup the order workflow relies
on. find_products_by_ids drops unknown ids instead of failing per id; the
caller decides whether a partial resolution is an error.
"""

import logging

from django.db import transaction
from django.db.models import Q

from catalog.models import Product
from storefront.domain.exceptions import ResourceNotFound
from storefront.pagination import paginate

logger = logging.getLogger(__name__)


def find_products_by_ids(product_ids):
    """Returns the existing products among product_ids, each at most once."""
    return list(Product.objects.filter(id__in=set(product_ids)))


def _load(product_id):
    try:
        return Product.objects.get(id=product_id)
    except Product.DoesNotExist:
        raise ResourceNotFound("Product", product_id)


def list_products(page_request):
    with transaction.atomic():
        return paginate(Product.objects.all(), page_request)


def get_product(product_id):
    with transaction.atomic():
        return _load(product_id)


def search_products(query, page_request):
    with transaction.atomic():
        matches = Product.objects.filter(
            Q(name__icontains=query)
            | Q(description__icontains=query)
            | Q(category__icontains=query)
        )
        return paginate(matches, page_request)


def filter_products(category=None, min_price=None, max_price=None, *, page_request):
    """Optional filters combined with AND; price bounds are inclusive."""
    with transaction.atomic():
        products = Product.objects.all()
        if category is not None:
            products = products.filter(category=category)
        if min_price is not None:
            products = products.filter(price__gte=min_price)
        if max_price is not None:
            products = products.filter(price__lte=max_price)
        return paginate(products, page_request)


def create_product(data):
    with transaction.atomic():
        product = Product.objects.create(**data)

    logger.info("Product created: id=%s name=%s price=%s", product.id, product.name, product.price)
    return product


def update_product(product_id, data):
    with transaction.atomic():
        product = _load(product_id)
        for attr, value in data.items():
            setattr(product, attr, value)
        product.save()

    return product


def delete_product(product_id):
    with transaction.atomic():
        product = _load(product_id)
        product.delete()

    logger.info("Product deleted: id=%s", product_id)
