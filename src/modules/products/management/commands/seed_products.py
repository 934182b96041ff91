from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.models import Product

SEED_PRODUCTS = [
    ("Keyboard", Decimal("75.00"), "Mechanical keyboard, US layout"),
    ("Mouse", Decimal("150.00"), "Wireless optical mouse"),
    ("Monitor", Decimal("320.00"), "27 inch IPS monitor"),
    ("Headphones", Decimal("95.50"), "Over-ear noise cancelling"),
    ("Webcam", Decimal("60.00"), "1080p USB webcam"),
    ("USB Hub", Decimal("25.99"), "7-port powered hub"),
    ("Laptop Stand", Decimal("40.00"), "Aluminium adjustable stand"),
    ("Microphone", Decimal("130.00"), "USB condenser microphone"),
    ("Desk Lamp", Decimal("35.00"), "LED lamp with dimmer"),
    ("External SSD", Decimal("110.00"), "1TB portable SSD"),
]


class Command(BaseCommand):
    help = "Seed the catalog with demo products (idempotent by name)."

    def add_arguments(self, parser):
        parser.add_argument(
            "--count",
            type=int,
            default=len(SEED_PRODUCTS),
            help="How many of the demo products to create.",
        )

    def handle(self, *args, **options):
        count = max(0, min(options["count"], len(SEED_PRODUCTS)))
        self.stdout.write("Seeding catalog products...")

        created = 0
        for name, price, description in SEED_PRODUCTS[:count]:
            _, was_created = Product.objects.get_or_create(
                name=name,
                defaults={"price": price, "description": description},
            )
            created += int(was_created)

        self.stdout.write(
            self.style.SUCCESS(f"Seed completed: products_created={created}")
        )
