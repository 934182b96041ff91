"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Look-ups return ``None`` instead of raising for missing rows — the
Service Layer decides how to translate a missing entity into a domain
error.  Database errors (integrity, connectivity) propagate untouched.

No method opens a transaction spanning calls: each one is a single
round trip (or one read plus one write for ``update``).
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog

from modules.core.repositories.interfaces import Filters
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def create(self, fields: Dict[str, Any]) -> Product:
        """Insert a product; ``id`` and ``available`` are set by the store."""
        return Product.objects.create(**fields)

    def count(self, filters: Optional[Filters] = None) -> int:
        return Product.objects.filter(**(filters or {})).count()

    def list(
        self, filters: Optional[Filters] = None, skip: int = 0, take: Optional[int] = None
    ) -> List[Product]:
        """List products in ``id`` order, sliced by ``skip`` / ``take``.

        Examples of valid filters::

            {"available": True}
            {"id__in": [1, 2, 3]}
        """
        queryset = Product.objects.filter(**(filters or {}))
        if take is None:
            return list(queryset[skip:])
        return list(queryset[skip : skip + take])

    def find_unique(self, filters: Filters) -> Optional[Product]:
        return Product.objects.filter(**filters).first()

    def update(self, filters: Filters, fields: Dict[str, Any]) -> Product:
        """Apply ``fields`` to the matching product and return it.

        Raises ``Product.DoesNotExist`` when nothing matches.
        """
        product = Product.objects.get(**filters)
        for name, value in fields.items():
            setattr(product, name, value)
        product.save(update_fields=list(fields))
        logger.debug("product.written", product_id=product.id, fields=sorted(fields))
        return product

    def find_many(self, filters: Filters) -> List[Product]:
        return list(Product.objects.filter(**filters))

    def hard_delete(self, filters: Filters) -> int:
        """Physically delete matching products.  Not used by the service."""
        count, _ = Product.objects.filter(**filters).hard_delete()
        logger.warning("product.hard_deleted", count=count)
        return count
