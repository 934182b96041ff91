"""Message-pattern tasks for the catalog.

Sibling services (orders, inventory) call the catalog through Celery
instead of HTTP, e.g.::

    app.send_task("products.validate_products", args=[[1, 2, 2]]).get()

Payloads go through the same DTOs as the HTTP API and results are
JSON-ready dicts.  Domain errors (``ProductNotFound``,
``ProductsNotAvailable``) propagate as the task's exception.
"""

from __future__ import annotations

from typing import Any, Dict, List

import structlog
from celery import shared_task
from django.conf import settings

from modules.products.dtos import (
    CreateProductDTO,
    PaginationDTO,
    ProductIdDTO,
    ProductOutputDTO,
    UpdateProductDTO,
    ValidateProductsDTO,
)
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService

logger = structlog.get_logger(__name__)


def _service() -> ProductService:
    return ProductService(repository=ProductDjangoRepository())


def _dump(product) -> Dict[str, Any]:
    return ProductOutputDTO.from_entity(product).model_dump(mode="json")


@shared_task(name="products.create_product")
def create_product(payload: Dict[str, Any]) -> Dict[str, Any]:
    dto = CreateProductDTO.model_validate(payload)
    return _dump(_service().create_product(dto))


@shared_task(name="products.find_all_products")
def find_all_products(pagination: Dict[str, Any] | None = None) -> Dict[str, Any]:
    """Paginated listing: ``{"data": [...], "metadata": {..., "totalPages"}}``."""
    params = {"limit": settings.DEFAULT_PAGE_LIMIT, **(pagination or {})}
    page = _service().list_products(PaginationDTO.model_validate(params))
    return {
        "data": [_dump(product) for product in page.data],
        "metadata": page.metadata.model_dump(by_alias=True),
    }


@shared_task(name="products.find_one_product")
def find_one_product(id: int) -> Dict[str, Any]:
    return _dump(_service().get_product(ProductIdDTO(id=id).id))


@shared_task(name="products.update_product")
def update_product(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Update the product named by ``payload["id"]`` with the other keys."""
    product_id = ProductIdDTO.model_validate(payload).id
    dto = UpdateProductDTO.model_validate(payload)
    return _dump(_service().update_product(product_id, dto))


@shared_task(name="products.delete_product")
def delete_product(id: int) -> Dict[str, Any]:
    return _dump(_service().delete_product(ProductIdDTO(id=id).id))


@shared_task(name="products.validate_products")
def validate_products(ids: List[int]) -> List[Dict[str, Any]]:
    dto = ValidateProductsDTO(ids=ids)
    products = _service().validate_products(dto.ids)
    logger.info("products.validated", count=len(products))
    return [_dump(product) for product in products]
