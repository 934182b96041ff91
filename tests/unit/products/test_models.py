"""Unit tests for the Product model.

Covers:
- Integer id assignment and defaults.
- Non-negative price constraint.
- Soft delete inherited from AvailabilityModel.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from django.db import IntegrityError

from modules.products.models import Product

pytestmark = pytest.mark.unit


class TestProductDefaults:
    def test_id_is_integer(self, make_product):
        product = make_product()
        assert isinstance(product.id, int)

    def test_available_by_default(self, make_product):
        assert make_product().available is True

    def test_description_defaults_to_empty(self, make_product):
        assert make_product().description == ""

    def test_ids_are_increasing(self, make_product):
        first = make_product(name="A")
        second = make_product(name="B")
        assert second.id > first.id

    def test_ids_not_reused_after_hard_delete(self, make_product):
        first = make_product(name="A")
        first_id = first.id
        first.hard_delete()
        second = make_product(name="B")
        assert second.id != first_id

    def test_str(self, make_product):
        product = make_product(name="Gadget")
        assert str(product) == f"#{product.id} - Gadget"

    def test_default_ordering_is_by_id(self, make_product):
        b = make_product(name="B")
        a = make_product(name="A")
        assert list(Product.objects.all()) == [b, a]


class TestProductConstraints:
    def test_zero_price_allowed(self, make_product):
        assert make_product(price=Decimal("0")).price == Decimal("0")

    def test_negative_price_rejected_by_database(self):
        with pytest.raises(IntegrityError):
            Product.objects.create(name="Broken", price=Decimal("-1.00"))


class TestProductSoftDelete:
    def test_delete_marks_unavailable(self, make_product):
        product = make_product()
        product.delete()
        product.refresh_from_db()
        assert product.available is False

    def test_active_excludes_soft_deleted(self, make_product):
        kept = make_product(name="Kept")
        make_product(name="Gone").delete()
        assert list(Product.objects.active()) == [kept]
