"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository``.

Rules enforced here:
- Listings, look-ups, updates and removals only target active products
  (``available=True``).
- Removal is a soft delete: ``available`` is set to ``False``.
- Batch validation checks existence only and ignores ``available``.

``update_product`` and ``delete_product`` check existence and then write
in two separate store calls with no lock in between.  A concurrent change
to the same product can land between them; the last write wins.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, List, Sequence

import structlog

from modules.products.dtos import PageMetadataDTO, ProductPage
from modules.products.exceptions import ProductNotFound, ProductsNotAvailable
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, PaginationDTO, UpdateProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

ACTIVE = {"available": True}


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, dto: CreateProductDTO) -> Product:
        """Create a new product; the store assigns ``id`` and ``available``."""
        product = self._repo.create(dto.model_dump())
        logger.info("product.created", product_id=product.id)
        return product

    def update_product(self, id: int, dto: UpdateProductDTO) -> Product:
        """Apply the supplied fields to an active product.

        Raises:
            ProductNotFound: if no active product has this id.
        """
        self.get_product(id)
        changes = dto.changes()
        product = self._repo.update({"id": id}, changes)
        logger.info("product.updated", product_id=id, fields=sorted(changes))
        return product

    def delete_product(self, id: int) -> Product:
        """Soft-delete an active product and return it.

        A second call for the same id raises, since the product is no
        longer active.

        Raises:
            ProductNotFound: if no active product has this id.
        """
        self.get_product(id)
        product = self._repo.update({"id": id}, {"available": False})
        logger.info("product.soft_deleted", product_id=id)
        return product

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self, pagination: PaginationDTO) -> ProductPage:
        """Return one page of active products with listing metadata.

        A page past the last one is empty but still reports true totals.
        """
        page, limit = pagination.page, pagination.limit
        total = self._repo.count(ACTIVE)
        data = self._repo.list(ACTIVE, skip=(page - 1) * limit, take=limit)
        return ProductPage(
            data=data,
            metadata=PageMetadataDTO(
                total=total,
                limit=limit,
                page=page,
                total_pages=math.ceil(total / limit),
            ),
        )

    def get_product(self, id: int) -> Product:
        """Retrieve a single active product by id.

        Raises:
            ProductNotFound: if no active product has this id.
        """
        product = self._repo.find_unique({"id": id, **ACTIVE})
        if not product:
            logger.info("product.not_found", product_id=id)
            raise ProductNotFound(id)
        return product

    def validate_products(self, ids: Sequence[int]) -> List[Product]:
        """Check that every id exists and return the matching products.

        Duplicate ids are collapsed.  Soft-deleted products count as
        existing: this is an existence check, not an availability check.

        Raises:
            ProductsNotAvailable: if any requested id is unknown to the store.
        """
        unique_ids = set(ids)
        products = self._repo.find_many({"id__in": sorted(unique_ids)})
        if len(products) != len(unique_ids):
            missing = unique_ids - {p.id for p in products}
            logger.warning("products.validation_failed", missing_ids=sorted(missing))
            raise ProductsNotAvailable()
        return products
