"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the transport layer (DRF views and
Celery tasks) and the Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for partial product updates.  It has no
  ``id`` field: the target is always the id passed next to it, and an
  ``id`` key in the raw payload is dropped on validation.
- ``PaginationDTO``: ``page`` / ``limit`` for the product listing.
- ``ValidateProductsDTO``: ids for the batch existence check.
- ``ProductIdDTO``: target id of a task message.
- ``ProductOutputDTO``: output with all product fields.
- ``PageMetadataDTO`` / ``ProductPage``: paginated listing result.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Annotated, Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from modules.products.models import Product

# Bounds mirror the ``products`` table columns.
Name = Annotated[str, Field(max_length=255)]
Price = Annotated[Decimal, Field(max_digits=10, decimal_places=2)]
ProductId = Annotated[int, Field(ge=1, le=2**63 - 1)]


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Validates:
    - ``name`` is a non-empty string that fits the 255-character column.
    - ``price`` is a non-negative Decimal with at most 10 digits, 2 decimals.
    """

    model_config = ConfigDict(frozen=True)

    name: Name
    price: Price
    description: str = ""

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Name must not be empty.")
        return v.strip()

    @field_validator("price")
    @classmethod
    def price_must_not_be_negative(cls, v: Decimal) -> Decimal:
        if v < 0:
            raise ValueError("Price cannot be negative.")
        return v


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product update requests.

    All fields are optional — only supplied fields will be updated.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: Name | None = None
    price: Price | None = None
    description: str | None = None

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            raise ValueError("Name must not be empty.")
        return v.strip() if v is not None else v

    @field_validator("price")
    @classmethod
    def price_must_not_be_negative(cls, v: Decimal | None) -> Decimal | None:
        if v is not None and v < 0:
            raise ValueError("Price cannot be negative.")
        return v

    def changes(self) -> dict[str, Any]:
        """Fields the caller actually supplied, ready for the store."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class PaginationDTO(BaseModel):
    """Page selection for the product listing (1-based ``page``)."""

    model_config = ConfigDict(frozen=True)

    page: int = 1
    limit: int = 10

    @field_validator("page", "limit")
    @classmethod
    def must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Must be a positive integer.")
        return v


class ValidateProductsDTO(BaseModel):
    """Ids to check for existence; duplicates are allowed.

    Ids outside the 64-bit key range cannot exist and are rejected here.
    """

    model_config = ConfigDict(frozen=True)

    ids: List[ProductId]


class ProductIdDTO(BaseModel):
    """Target id carried in a task message."""

    model_config = ConfigDict(frozen=True)

    id: ProductId


# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


class ProductOutputDTO(BaseModel):
    """Immutable DTO for product responses."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    description: str
    price: Decimal
    available: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, product: Product) -> ProductOutputDTO:
        """Build an output DTO from a Product model instance."""
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            available=product.available,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


class PageMetadataDTO(BaseModel):
    """Totals for a paginated listing; ``total_pages`` is ``totalPages`` on the wire."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total: int
    limit: int
    page: int
    total_pages: int = Field(serialization_alias="totalPages")


class ProductPage(BaseModel):
    """One page of active products plus listing metadata."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    data: List[Any]
    metadata: PageMetadataDTO
