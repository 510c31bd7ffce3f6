from django.db import models


class Customer(models.Model):
    """
    A purchasing identity.

    Orders reference customers by id only; this app owns the record and its
    uniqueness rules (username and email are UNIQUE at the database level).
    """

    username = models.CharField(max_length=50, unique=True)
    email = models.EmailField(max_length=255, unique=True)
    first_name = models.CharField(max_length=50)
    last_name = models.CharField(max_length=50)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return f"Customer {self.id} - {self.username}"
