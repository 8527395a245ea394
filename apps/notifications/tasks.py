"""Celery tasks — notification delivery."""
import logging
from datetime import timedelta

from celery import shared_task
from django.utils import timezone

from .models import Notification
from .notifiers import dispatch_notification

logger = logging.getLogger(__name__)

# One beat period: younger PENDING rows may still have a delivery queued.
PENDING_GRACE = timedelta(minutes=15)


@shared_task(queue="notifications")
def deliver_notification(notification_id: str):
    """Send the email/webhook copies of a notification."""
    try:
        notif = Notification.objects.select_related("recipient").get(pk=notification_id)
    except Notification.DoesNotExist:
        logger.error("Notification %s not found", notification_id)
        return None
    if notif.delivery_status != Notification.DeliveryStatus.PENDING:
        logger.info("Notification %s already %s", notification_id, notif.delivery_status)
        return None
    return dispatch_notification(notif)


@shared_task(queue="notifications")
def dispatch_pending_notifications():
    """Deliver notifications whose delivery was never enqueued."""
    cutoff = timezone.now() - PENDING_GRACE
    pending = Notification.objects.filter(
        delivery_status=Notification.DeliveryStatus.PENDING,
        created_at__lt=cutoff,
    ).select_related("recipient")[:50]

    delivered = 0
    for notif in pending:
        if dispatch_notification(notif):
            delivered += 1

    logger.info("Pending notifications: %d delivered", delivered)
    return {"delivered": delivered}
