"""
Order Aggregate Repository

The only module that reads or writes Order rows. Functions here assume the
caller already opened a unit of work (transaction.atomic()) and never
demarcate transactions themselves.

Missing rows are reported as ResourceNotFound so callers never depend on
Order.DoesNotExist.
"""

from datetime import timezone
from decimal import Decimal

from django.db.models import Sum
from django.db.models.functions import ExtractYear

from orders.models import Order
from storefront.domain.exceptions import ResourceNotFound
from storefront.pagination import paginate

CENT = Decimal("0.01")


def insert_order(order):
    """Persists a new order; id and timestamps are assigned by the database."""
    order.save(force_insert=True)
    return order


def find_order(order_id):
    try:
        return Order.objects.get(id=order_id)
    except Order.DoesNotExist:
        raise ResourceNotFound("Order", order_id)


def list_orders(page_request):
    return paginate(Order.objects.all(), page_request)


def list_orders_by_customer(customer_id, page_request):
    return paginate(Order.objects.filter(customer_id=customer_id), page_request)


def list_orders_by_filters(customer_id=None, status=None, *, page_request):
    """Each filter is optional; set filters are combined with AND."""
    orders = Order.objects.all()
    if customer_id is not None:
        orders = orders.filter(customer_id=customer_id)
    if status is not None:
        orders = orders.filter(status=status)
    return paginate(orders, page_request)


def update_order_status(order_id, status):
    order = find_order(order_id)
    order.status = status
    # updated_at is auto_now, so it must be listed for the UPDATE to touch it
    order.save(update_fields=["status", "updated_at"])
    return order


def delete_order(order_id):
    deleted, _ = Order.objects.filter(id=order_id).delete()
    if not deleted:
        raise ResourceNotFound("Order", order_id)


def aggregate_revenue_by_year(customer_id):
    """
    Sums total_amount of a customer's orders per calendar year.

    The year is taken from created_at in UTC regardless of the database
    connection timezone. Returns [(year, total), ...] ascending by year;
    years without orders are absent and a customer without orders yields [].
    """
    rows = (
        Order.objects
        .filter(customer_id=customer_id)
        .annotate(year=ExtractYear("created_at", tzinfo=timezone.utc))
        .values("year")
        .annotate(total=Sum("total_amount"))
        .order_by("year")
    )
    return [(row["year"], Decimal(row["total"]).quantize(CENT)) for row in rows]
