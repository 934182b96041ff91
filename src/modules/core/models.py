"""Base abstract models shared by the catalog modules.

Provides:
- ``TimeStampedModel``: created_at / updated_at bookkeeping.
- ``AvailabilityModel``: soft delete via an ``available`` flag.

Design decisions:
- ``objects`` manager returns ALL records (unfiltered).  Use ``.active()``
  explicitly to exclude soft-deleted rows — existence checks that must see
  inactive rows (batch validation) rely on this.
- ``delete()`` is overridden to soft-delete; ``hard_delete()`` is the only
  way to physically remove a row.
- ``save()`` guard ensures ``updated_at`` is included when ``update_fields``
  is specified (Django skips ``auto_now`` fields otherwise).
"""

from __future__ import annotations

from django.db import models
from django.utils import timezone

# ---------------------------------------------------------------------------
# TimeStampedModel
# ---------------------------------------------------------------------------


class TimeStampedModel(models.Model):
    """Abstract base with timestamp bookkeeping."""

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs) -> None:
        """Ensure ``updated_at`` is refreshed even when ``update_fields`` is passed."""
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "updated_at" not in update_fields:
            kwargs["update_fields"] = list(update_fields) + ["updated_at"]
        super().save(*args, **kwargs)


# ---------------------------------------------------------------------------
# Availability (soft delete) infrastructure
# ---------------------------------------------------------------------------


class AvailabilityQuerySet(models.QuerySet):
    """QuerySet with availability helpers."""

    def active(self) -> AvailabilityQuerySet:
        """Return only available records."""
        return self.filter(available=True)

    def inactive(self) -> AvailabilityQuerySet:
        """Return only soft-deleted records."""
        return self.filter(available=False)

    def delete(self) -> tuple[int, dict[str, int]]:
        """Bulk soft-delete: flips ``available`` and touches ``updated_at``."""
        count = self.active().update(available=False, updated_at=timezone.now())
        return count, {self.model._meta.label: count}

    def hard_delete(self) -> tuple[int, dict[str, int]]:
        """Permanently remove all records in the queryset."""
        return super().delete()


class AvailabilityManager(models.Manager):
    """Manager that exposes ``.active()`` / ``.inactive()`` on the queryset."""

    def get_queryset(self) -> AvailabilityQuerySet:
        return AvailabilityQuerySet(self.model, using=self._db)

    def active(self) -> AvailabilityQuerySet:
        return self.get_queryset().active()

    def inactive(self) -> AvailabilityQuerySet:
        return self.get_queryset().inactive()


class AvailabilityModel(TimeStampedModel):
    """Abstract model with soft delete via an ``available`` boolean.

    - New rows are available.
    - ``delete()`` marks the row unavailable; there is no ``restore()``,
      a soft-deleted record never becomes available again.
    """

    available = models.BooleanField(default=True, db_index=True)

    objects = AvailabilityManager()

    class Meta:
        abstract = True

    def delete(self, using=None, keep_parents=False) -> tuple[int, dict[str, int]]:
        """Soft-delete this instance (no-op if already unavailable)."""
        if not self.available:
            return 0, {}
        self.available = False
        self.save(update_fields=["available", "updated_at"])
        return 1, {self._meta.label: 1}

    def hard_delete(self, using=None, keep_parents=False) -> tuple[int, dict[str, int]]:
        """Permanently remove this record from the database."""
        return super().delete(using=using, keep_parents=keep_parents)
