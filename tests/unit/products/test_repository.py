"""Unit tests for ProductDjangoRepository.

Covers:
- create / count / list / find_unique / update / find_many / hard_delete.
- Filters over ``id`` and ``available``.
- Store errors propagating untouched.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.repositories.interfaces import IProductRepository

pytestmark = pytest.mark.unit


@pytest.fixture()
def repo():
    return ProductDjangoRepository()


# ===========================================================================
# Instantiation
# ===========================================================================


class TestRepositoryInstantiation:
    def test_is_instance_of_interface(self, repo):
        assert isinstance(repo, IProductRepository)


# ===========================================================================
# create
# ===========================================================================


class TestCreate:
    def test_assigns_id_and_defaults_available(self, repo):
        product = repo.create({"name": "New", "price": Decimal("9.99")})
        assert product.id is not None
        assert product.available is True
        assert Product.objects.filter(id=product.id).exists()


# ===========================================================================
# count / list
# ===========================================================================


class TestCountAndList:
    def test_count_with_filters(self, repo, make_product):
        make_product(name="A")
        make_product(name="B", available=False)
        assert repo.count() == 2
        assert repo.count({"available": True}) == 1

    def test_list_skip_and_take(self, repo, make_product):
        products = [make_product(name=f"P{i}") for i in range(5)]
        page = repo.list({"available": True}, skip=2, take=2)
        assert page == products[2:4]

    def test_list_without_take_returns_rest(self, repo, make_product):
        products = [make_product(name=f"P{i}") for i in range(3)]
        assert repo.list(skip=1) == products[1:]

    def test_list_past_end_is_empty(self, repo, make_product):
        make_product()
        assert repo.list({"available": True}, skip=10, take=10) == []

    def test_list_excludes_filtered_rows(self, repo, make_product):
        kept = make_product(name="Kept")
        make_product(name="Gone", available=False)
        assert repo.list({"available": True}, skip=0, take=10) == [kept]


# ===========================================================================
# find_unique / find_many
# ===========================================================================


class TestFind:
    def test_find_unique_returns_match(self, repo, make_product):
        product = make_product()
        assert repo.find_unique({"id": product.id, "available": True}) == product

    def test_find_unique_returns_none_when_filtered_out(self, repo, make_product):
        product = make_product(available=False)
        assert repo.find_unique({"id": product.id, "available": True}) is None

    def test_find_unique_returns_none_for_unknown_id(self, repo):
        assert repo.find_unique({"id": 999_999}) is None

    def test_find_many_by_ids_ignores_availability(self, repo, make_product):
        a = make_product(name="A")
        b = make_product(name="B", available=False)
        make_product(name="C")
        assert repo.find_many({"id__in": [a.id, b.id, 999_999]}) == [a, b]


# ===========================================================================
# update
# ===========================================================================


class TestUpdate:
    def test_updates_only_given_fields(self, repo, make_product):
        product = make_product(name="Old", description="keep me")
        updated = repo.update({"id": product.id}, {"name": "New"})
        product.refresh_from_db()
        assert updated.name == "New"
        assert product.name == "New"
        assert product.description == "keep me"

    def test_can_flip_available(self, repo, make_product):
        product = make_product()
        updated = repo.update({"id": product.id}, {"available": False})
        assert updated.available is False
        product.refresh_from_db()
        assert product.available is False

    def test_missing_row_raises_does_not_exist(self, repo):
        with pytest.raises(Product.DoesNotExist):
            repo.update({"id": 999_999}, {"name": "Ghost"})


# ===========================================================================
# hard_delete
# ===========================================================================


class TestHardDelete:
    def test_physically_removes_rows(self, repo, make_product):
        product = make_product()
        assert repo.hard_delete({"id": product.id}) == 1
        assert not Product.objects.filter(id=product.id).exists()

    def test_returns_zero_when_nothing_matches(self, repo):
        assert repo.hard_delete({"id": 999_999}) == 0
