"""Product domain exceptions.

Raised by the Service Layer when business rules are violated.  Each
carries a human-readable ``message`` and a client-error ``status_code``
so the transport layer (HTTP views, Celery callers) can translate it
without inspecting the message.  Store errors are never wrapped in these.
"""

from __future__ import annotations

from typing import Any, Dict


class ProductError(Exception):
    """Base class for catalog errors surfaced to callers."""

    status_code: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Error payload in the ``{"message", "status"}`` shape callers expect."""
        return {"message": self.message, "status": self.status_code}


class ProductNotFound(ProductError):
    """No active product exists with the requested id."""

    status_code = 404

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product with id {product_id} not found")
        self.product_id = product_id
        # Rebuilt from ``args`` when unpickled or re-raised by a Celery client.
        self.args = (product_id,)


class ProductsNotAvailable(ProductError):
    """At least one id of a batch validation does not exist in the store.

    Soft-deleted products still count as existing, despite the name.
    """

    status_code = 400

    def __init__(self, message: str = "Some products are not available") -> None:
        super().__init__(message)
