from django.db import models


class Product(models.Model):
    """
    A sellable catalog item.

    Orders copy the price into their total at creation time and keep only
    the product id, so price changes never rewrite past orders.
    """

    name = models.CharField(max_length=100)
    description = models.CharField(max_length=500, blank=True, default="")
    price = models.DecimalField(max_digits=10, decimal_places=2)
    stock_quantity = models.IntegerField()
    category = models.CharField(max_length=50, blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return f"Product {self.id} - {self.name} ({self.price})"
