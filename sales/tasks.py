from celery import shared_task
import logging

from .services import SaleService

logger = logging.getLogger(__name__)


@shared_task(name="sales.expire_finished_sales")
def expire_finished_sales():
    """Periodic cleanup, scheduled by CELERY_BEAT_SCHEDULE every SALE_CLEANUP_INTERVAL seconds."""
    logger.debug("Running expired sale cleanup job")
    expired = SaleService.expire_finished_sales()
    return {"items": expired.items, "restaurants": expired.restaurants}
