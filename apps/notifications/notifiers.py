"""Notification dispatchers: email and webhook copies of in-app notifications."""
import logging

import httpx
from django.conf import settings
from django.core.mail import send_mail
from django.utils import timezone

from .models import Notification

logger = logging.getLogger(__name__)


def send_email_notification(notification: Notification) -> None:
    send_mail(
        subject=notification.title,
        message=notification.message,
        from_email=settings.DEFAULT_FROM_EMAIL,
        recipient_list=[notification.recipient.email],
        fail_silently=False,
    )


def send_webhook_notification(notification: Notification) -> None:
    """Post JSON to the recipient's webhook URL."""
    payload = {
        "event": notification.type,
        "title": notification.title,
        "message": notification.message,
        "data": notification.data,
        "timestamp": notification.created_at.isoformat(),
    }
    resp = httpx.post(
        notification.recipient.webhook_url,
        json=payload,
        timeout=settings.WEBHOOK_TIMEOUT,
    )
    resp.raise_for_status()


def dispatch_notification(notification: Notification) -> bool:
    """Deliver external copies according to the recipient's preferences.

    In-app only recipients are marked SKIPPED. Returns True unless a channel failed.
    """
    recipient = notification.recipient
    channels = []
    if recipient.notify_email and recipient.email:
        channels.append(("email", send_email_notification))
    if recipient.webhook_url:
        channels.append(("webhook", send_webhook_notification))

    if not channels:
        notification.delivery_status = Notification.DeliveryStatus.SKIPPED
        notification.save(update_fields=["delivery_status", "updated_at"])
        return True

    errors = []
    for name, send in channels:
        try:
            send(notification)
        except Exception as exc:
            logger.exception("%s delivery failed for notification %s", name, notification.pk)
            errors.append(f"{name}: {exc}")

    if errors:
        notification.delivery_status = Notification.DeliveryStatus.FAILED
        notification.error_message = "\n".join(errors)
        notification.save(update_fields=["delivery_status", "error_message", "updated_at"])
        return False

    notification.delivery_status = Notification.DeliveryStatus.SENT
    notification.sent_at = timezone.now()
    notification.error_message = ""
    notification.save(update_fields=["delivery_status", "sent_at", "error_message", "updated_at"])
    return True
