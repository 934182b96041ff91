"""Product URL configuration.

Routes (all under ``/api/v1/``)::

    products/             GET list, POST create
    products/{id}/        GET, PUT/PATCH, DELETE (soft)
    products/validate/    POST batch existence check
"""

from __future__ import annotations

from rest_framework.routers import DefaultRouter

from modules.products.views import ProductViewSet

router = DefaultRouter(trailing_slash=True)
router.register("products", ProductViewSet, basename="product")

urlpatterns = router.urls
