"""Product model, the only entity of the catalog.

Rules implemented here:
- ``id`` is an integer assigned by the database and never reused.
- ``price`` cannot be negative.
- New products are available; soft delete (``available=False``) is
  inherited from ``AvailabilityModel`` and is the only deletion path
  exposed by the service.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import AvailabilityModel


class Product(AvailabilityModel):
    """Catalog product.

    Default ordering is by ``id`` so paginated listings are stable.
    """

    id = models.BigAutoField(primary_key=True)
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0"))],
    )

    class Meta:
        db_table = "products"
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gte=0),
                name="products_price_non_negative",
            ),
        ]

    def __str__(self) -> str:
        return f"#{self.id} - {self.name}"
