"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into their status code with
a ``{"message", "status"}`` body — the view never swallows generic
exceptions, store errors surface as server errors.
"""

from __future__ import annotations

from django.conf import settings
from django.http import QueryDict
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.products.dtos import (
    CreateProductDTO,
    PaginationDTO,
    UpdateProductDTO,
    ValidateProductsDTO,
)
from modules.products.exceptions import ProductError
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer, serialize_page
from modules.products.services import ProductService


def _invalid(exc: Exception) -> Response:
    return Response(
        {"message": str(exc), "status": status.HTTP_400_BAD_REQUEST},
        status=status.HTTP_400_BAD_REQUEST,
    )


def _domain_error(exc: ProductError) -> Response:
    return Response(exc.to_dict(), status=exc.status_code)


def _payload(request: Request, *lists: str):
    """Request body as a plain mapping.

    Form and multipart bodies arrive as a ``QueryDict``; keys named in
    ``lists`` keep every value, the others keep the last one.
    """
    data = request.data
    if not isinstance(data, QueryDict):
        return data
    payload = data.dict()
    for key in lists:
        if key in data:
            payload[key] = data.getlist(key)
    return payload


class ProductViewSet(GenericViewSet):
    """ViewSet for the catalog operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    All ORM access goes through the service/repository layer.
    """

    serializer_class = ProductSerializer
    # Ids are 64-bit; longer digit runs cannot match a product.
    lookup_value_regex = r"\d{1,18}"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/products/?page=&limit="""
        try:
            pagination = PaginationDTO(
                page=request.query_params.get("page", 1),
                limit=request.query_params.get("limit", settings.DEFAULT_PAGE_LIMIT),
            )
        except PydanticValidationError as exc:
            return _invalid(exc)

        page = self._service.list_products(pagination)
        return Response(serialize_page(page))

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{pk}/"""
        try:
            product = self._service.get_product(int(pk))
        except ProductError as exc:
            return _domain_error(exc)
        return Response(ProductSerializer(product).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/products/"""
        try:
            dto = CreateProductDTO.model_validate(_payload(request))
        except (PydanticValidationError, ValueError, TypeError) as exc:
            return _invalid(exc)

        product = self._service.create_product(dto)
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT/PATCH /api/v1/products/{pk}/

        Any ``id`` in the body is ignored; the URL id is the target.
        """
        try:
            dto = UpdateProductDTO.model_validate(_payload(request))
        except (PydanticValidationError, ValueError, TypeError) as exc:
            return _invalid(exc)

        try:
            product = self._service.update_product(int(pk), dto)
        except ProductError as exc:
            return _domain_error(exc)
        return Response(ProductSerializer(product).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/products/{pk}/"""
        return self.update(request, pk)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/products/{pk}/

        Soft delete: responds with the product, now ``available: false``.
        """
        try:
            product = self._service.delete_product(int(pk))
        except ProductError as exc:
            return _domain_error(exc)
        return Response(ProductSerializer(product).data)

    # ------------------------------------------------------------------
    # Batch validation
    # ------------------------------------------------------------------

    @action(detail=False, methods=["post"], url_path="validate")
    def validate(self, request: Request) -> Response:
        """POST /api/v1/products/validate/

        Accepts ``{"ids": [1, 2, 2]}``.  Succeeds when every id exists,
        whether or not the product is still available.
        """
        try:
            dto = ValidateProductsDTO.model_validate(_payload(request, "ids"))
        except (PydanticValidationError, ValueError, TypeError) as exc:
            return _invalid(exc)

        try:
            products = self._service.validate_products(dto.ids)
        except ProductError as exc:
            return _domain_error(exc)
        return Response(ProductSerializer(products, many=True).data)
