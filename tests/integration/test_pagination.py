"""Integration tests for the paginated product listing."""

from __future__ import annotations

import math
from decimal import Decimal

import pytest

from modules.products.models import Product

pytestmark = pytest.mark.integration


@pytest.fixture()
def product_batch():
    """Create a batch of 45 products, the last 5 soft-deleted."""
    Product.objects.bulk_create(
        [
            Product(
                name=f"Product {idx:03d}",
                price=Decimal("9.99"),
                available=idx <= 40,
            )
            for idx in range(1, 46)
        ]
    )
    return list(Product.objects.all())


class TestPagination:
    def test_default_limit(self, auth_client, product_batch, settings):
        response = auth_client.get("/api/v1/products/")
        assert response.status_code == 200
        assert len(response.data["data"]) == settings.DEFAULT_PAGE_LIMIT
        assert response.data["metadata"]["page"] == 1
        assert response.data["metadata"]["limit"] == settings.DEFAULT_PAGE_LIMIT

    def test_metadata_counts_only_active(self, auth_client, product_batch):
        response = auth_client.get("/api/v1/products/?page=1&limit=15")
        assert response.data["metadata"] == {
            "total": 40,
            "limit": 15,
            "page": 1,
            "totalPages": 3,
        }

    def test_pages_follow_id_order(self, auth_client, product_batch):
        first = auth_client.get("/api/v1/products/?page=1&limit=10").data["data"]
        second = auth_client.get("/api/v1/products/?page=2&limit=10").data["data"]
        ids = [item["id"] for item in first + second]
        assert ids == sorted(ids)
        assert len(set(ids)) == 20

    def test_last_partial_page(self, auth_client, product_batch):
        response = auth_client.get("/api/v1/products/?page=3&limit=15")
        assert len(response.data["data"]) == 10
        assert all(item["available"] for item in response.data["data"])

    def test_page_beyond_total_is_empty(self, auth_client, product_batch):
        response = auth_client.get("/api/v1/products/?page=99&limit=10")
        assert response.status_code == 200
        assert response.data["data"] == []
        assert response.data["metadata"]["total"] == 40
        assert response.data["metadata"]["totalPages"] == 4

    @pytest.mark.parametrize("limit", [1, 3, 7, 40, 100])
    def test_total_pages_and_page_size(self, auth_client, product_batch, limit):
        response = auth_client.get(f"/api/v1/products/?page=1&limit={limit}")
        metadata = response.data["metadata"]
        assert metadata["totalPages"] == math.ceil(metadata["total"] / limit)
        assert len(response.data["data"]) <= limit

    def test_empty_catalog(self, auth_client):
        response = auth_client.get("/api/v1/products/")
        assert response.data == {
            "data": [],
            "metadata": {"total": 0, "limit": 10, "page": 1, "totalPages": 0},
        }

    @pytest.mark.parametrize("query", ["page=0", "limit=0", "limit=-5", "page=abc"])
    def test_invalid_params_return_400(self, auth_client, query):
        response = auth_client.get(f"/api/v1/products/?{query}")
        assert response.status_code == 400
        assert response.data["status"] == 400


class TestCatalogLifecycle:
    def test_create_list_remove_list(self, auth_client, make_product):
        make_product(name="Existing")
        created = auth_client.post(
            "/api/v1/products/", {"name": "A", "price": "10"}, format="json"
        ).data
        assert created["available"] is True

        before = auth_client.get("/api/v1/products/?page=1&limit=10").data
        assert created["id"] in [item["id"] for item in before["data"]]
        assert before["metadata"]["total"] >= 1

        removed = auth_client.delete(f"/api/v1/products/{created['id']}/")
        assert removed.status_code == 200

        after = auth_client.get("/api/v1/products/?page=1&limit=10").data
        assert created["id"] not in [item["id"] for item in after["data"]]
        assert after["metadata"]["total"] == before["metadata"]["total"] - 1
