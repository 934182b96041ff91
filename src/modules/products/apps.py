import structlog
from django.apps import AppConfig

logger = structlog.get_logger(__name__)


class ProductsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "modules.products"
    label = "products"

    def ready(self) -> None:
        logger.info("catalog.ready", app=self.label)
