"""Product DRF serializers for API output.

The serializer operates at the Interface layer (API Views).
Input is validated by the Pydantic DTOs in ``dtos.py`` before it
reaches the Service layer.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.dtos import ProductPage
from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "description",
            "price",
            "available",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "available", "created_at", "updated_at"]


def serialize_page(page: ProductPage) -> dict:
    """Render a ``ProductPage`` as ``{"data": [...], "metadata": {...}}``."""
    return {
        "data": ProductSerializer(page.data, many=True).data,
        "metadata": page.metadata.model_dump(by_alias=True),
    }
