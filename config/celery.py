"""Celery configuration for Growest Connect."""
import os

from celery import Celery
from celery.schedules import crontab

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.development")

app = Celery("growest")
app.config_from_object("django.conf:settings", namespace="CELERY")
app.autodiscover_tasks()

# ── Named queues ────────────────────────────────────────
app.conf.task_routes = {
    "apps.matching.tasks.*": {"queue": "ai"},
    "apps.notifications.tasks.*": {"queue": "notifications"},
}

# ── Beat schedule (periodic tasks) ─────────────────────
app.conf.beat_schedule = {
    # Notifications jamais mises en file (broker indisponible) — toutes les 15 min
    "dispatch-pending-notifications": {
        "task": "apps.notifications.tasks.dispatch_pending_notifications",
        "schedule": crontab(minute="*/15"),
        "options": {"queue": "notifications"},
    },
}
