import logging
from datetime import timedelta

from celery import shared_task
from django.utils import timezone

logger = logging.getLogger(__name__)


@shared_task
def prune_stored_wishlists(days=None):
    """Delete stored wishlists that have not been restored or touched in the given number of days."""
    from apps.wishlist.conf import get_wishlist_settings
    from apps.wishlist.models import StoredWishlist

    config = get_wishlist_settings()
    if days is None:
        days = config.stored_retention_days

    cutoff = timezone.now() - timedelta(days=days)
    expired = StoredWishlist.objects.using(config.database).filter(updated_at__lt=cutoff)
    count = expired.count()
    if count:
        expired.delete()
        logger.info("Deleted %d stored wishlist(s) older than %d days.", count, days)
    return count
