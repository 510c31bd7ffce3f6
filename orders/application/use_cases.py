"""
Application Use Cases — Order Workflow

The one place order business rules live. Every public function is a single
unit of work: it opens transaction.atomic(), performs all reads and writes
through the order repository and the customer/catalog lookups, and either
commits as a whole or rolls back when any exception leaves the block.

Core guarantees provided:

- Validation before mutation: the customer and every referenced product are
  resolved before the order row is written.
- Server-computed totals: the client never supplies total_amount; it is the
  sum of the current unit prices, one per requested occurrence.
- Duplicates are allowed: a product requested twice is charged twice and
  listed twice in product_ids.
- No status state machine: any status may replace any other, and deletion
  does not look at the status.
- No locking and no version column: concurrent status updates are
  last-write-wins.
"""

import logging
from decimal import Decimal

from django.db import transaction

from catalog.application.use_cases import find_products_by_ids
from customers.application.use_cases import customer_exists
from orders import repository
from orders.domain.records import RevenueRecord
from orders.models import Order, OrderStatus
from storefront.domain.exceptions import ResourceNotFound

logger = logging.getLogger(__name__)


def _require_customer(customer_id):
    if not customer_exists(customer_id):
        logger.warning("Customer not found: customer=%s", customer_id)
        raise ResourceNotFound("Customer", customer_id)


def create_order(customer_id, product_ids):
    """
    Creates a PENDING order for customer_id from product_ids.

    product_ids must be non-empty (enforced by input validation). Every
    distinct id must resolve to an existing product, otherwise nothing is
    written.
    """
    with transaction.atomic():
        _require_customer(customer_id)

        products = find_products_by_ids(product_ids)
        prices = {product.id: product.price for product in products}

        missing = set(product_ids) - prices.keys()
        if missing:
            logger.warning(
                "Unknown products: customer=%s missing=%s",
                customer_id, sorted(missing),
            )
            raise ResourceNotFound("Product", message="One or more products not found")

        total_amount = sum((prices[product_id] for product_id in product_ids), Decimal("0.00"))

        order = repository.insert_order(
            Order(
                customer_id=customer_id,
                product_ids=list(product_ids),
                total_amount=total_amount,
                status=OrderStatus.PENDING,
            )
        )

    logger.info(
        "Order created: order=%s customer=%s items=%s total=%s",
        order.id, customer_id, len(order.product_ids), order.total_amount,
    )
    return order


def get_order(order_id):
    with transaction.atomic():
        return repository.find_order(order_id)


def list_orders(page_request):
    with transaction.atomic():
        return repository.list_orders(page_request)


def list_customer_orders(customer_id, page_request):
    with transaction.atomic():
        return repository.list_orders_by_customer(customer_id, page_request)


def filter_orders(customer_id=None, status=None, *, page_request):
    with transaction.atomic():
        return repository.list_orders_by_filters(
            customer_id=customer_id,
            status=status,
            page_request=page_request,
        )


def update_order_status(order_id, status):
    """Overwrites the status unconditionally; there is no transition table."""
    with transaction.atomic():
        order = repository.update_order_status(order_id, OrderStatus(status))

    logger.info("Order status updated: order=%s status=%s", order_id, order.status)
    return order


def delete_order(order_id):
    """Deletes regardless of status."""
    with transaction.atomic():
        repository.delete_order(order_id)

    logger.info("Order deleted: order=%s", order_id)


def get_customer_revenue_per_year(customer_id):
    """
    Returns one RevenueRecord per UTC calendar year in which the customer
    has orders, ascending by year. A customer without orders gets [].
    """
    with transaction.atomic():
        _require_customer(customer_id)
        rows = repository.aggregate_revenue_by_year(customer_id)

    return [
        RevenueRecord(customer_id=customer_id, year=year, total_revenue=total)
        for year, total in rows
    ]
