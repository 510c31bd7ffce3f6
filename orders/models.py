"""
Persistence Models — Orders (Django ORM)

Key decisions:

- The customer is a ForeignKey so referential integrity is enforced by the
  database; deleting a customer that still owns orders is refused (PROTECT).
- Products are referenced by plain ids held in product_ids, in request
  order, duplicates included. There is no relation to catalog rows, so the
  ORM never fetches products behind the caller's back; resolution happens
  explicitly in the order workflow.
- total_amount is computed by the server at creation and is a snapshot:
  later price changes do not touch it.
- created_at / updated_at are timezone-aware (USE_TZ) and stored in UTC.
"""

from django.db import models

from customers.models import Customer


class OrderStatus(models.TextChoices):
    PENDING = "PENDING", "Pending"
    PROCESSING = "PROCESSING", "Processing"
    SHIPPED = "SHIPPED", "Shipped"
    DELIVERED = "DELIVERED", "Delivered"
    CANCELLED = "CANCELLED", "Cancelled"


class Order(models.Model):
    customer = models.ForeignKey(
        Customer,
        on_delete=models.PROTECT,
        related_name="orders",
    )

    product_ids = models.JSONField(default=list)

    total_amount = models.DecimalField(max_digits=10, decimal_places=2)

    status = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.PENDING,
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]
        indexes = [
            models.Index(fields=["customer", "created_at"]),
            models.Index(fields=["status"]),
        ]

    def __str__(self):
        return f"Order {self.id} - {self.status} - {self.total_amount}"
