"""Product repository interface.

Binds ``IRepository`` to the ``Product`` aggregate.  The service layer
only depends on this contract; ``ProductDjangoRepository`` is the
production implementation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""
