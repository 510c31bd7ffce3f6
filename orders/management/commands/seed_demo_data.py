import logging
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from catalog.models import Product
from customers.models import Customer
from orders.application.use_cases import create_order

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Populate an empty database with sample customers, products and one order."

    def handle(self, *args, **options):
        if Customer.objects.exists():
            self.stdout.write("Customers already present; nothing to seed.")
            return

        with transaction.atomic():
            john = Customer.objects.create(
                username="johndoe", email="john.doe@example.com", first_name="John", last_name="Doe",
            )
            Customer.objects.create(
                username="janedoe", email="jane.doe@example.com", first_name="Jane", last_name="Doe",
            )

            laptop = Product.objects.create(
                name="Laptop", description="High-performance laptop",
                price=Decimal("999.99"), stock_quantity=50, category="Electronics",
            )
            mouse = Product.objects.create(
                name="Mouse", description="Wireless mouse",
                price=Decimal("29.99"), stock_quantity=200, category="Electronics",
            )
            Product.objects.create(
                name="Desk Chair", description="Ergonomic office chair",
                price=Decimal("249.99"), stock_quantity=30, category="Furniture",
            )

            order = create_order(john.id, [laptop.id, mouse.id])

        logger.info("Demo data seeded: order=%s total=%s", order.id, order.total_amount)
        self.stdout.write(self.style.SUCCESS("Sample data initialized successfully."))
