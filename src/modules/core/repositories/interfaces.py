"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.

Filters are plain dictionaries of equality / inclusion look-ups
(``{"id": 3, "available": True}``, ``{"id__in": [1, 2]}``).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")

Filters = Dict[str, Any]


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Product``).
    """

    @abstractmethod
    def create(self, fields: Dict[str, Any]) -> T:
        """Insert a new entity; the store assigns its identifier."""

    @abstractmethod
    def count(self, filters: Optional[Filters] = None) -> int:
        """Count entities matching ``filters``."""

    @abstractmethod
    def list(
        self, filters: Optional[Filters] = None, skip: int = 0, take: Optional[int] = None
    ) -> List[T]:
        """Return at most ``take`` entities after skipping ``skip``, in store order."""

    @abstractmethod
    def find_unique(self, filters: Filters) -> Optional[T]:
        """Return the entity matching ``filters`` or ``None``."""

    @abstractmethod
    def update(self, filters: Filters, fields: Dict[str, Any]) -> T:
        """Apply ``fields`` to the single entity matching ``filters``."""

    @abstractmethod
    def find_many(self, filters: Filters) -> List[T]:
        """Return every entity matching ``filters``."""

    @abstractmethod
    def hard_delete(self, filters: Filters) -> int:
        """Physically remove matching entities; returns the number removed."""
