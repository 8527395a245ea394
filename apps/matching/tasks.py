"""Celery tasks — matching."""
import logging
import uuid

from celery import shared_task

from apps.profiles.models import Profile

from .types import MatchRequest, Preferences

logger = logging.getLogger(__name__)


@shared_task(queue="ai")
def refresh_matches(profile_id: str, role: str, preferences: dict | None = None):
    """Recompute and persist matches for a profile outside the request cycle."""
    from .engine import run_advanced_matching

    request = MatchRequest(
        requesting_user_id=uuid.UUID(profile_id),
        requesting_user_role=role,
        preferences=Preferences.from_dict(preferences),
    )
    try:
        result = run_advanced_matching(request)
    except Profile.DoesNotExist:
        logger.error("Profile %s not found", profile_id)
        return None

    return {"total": result.total, "ai_analyzed": result.ai_analyzed}
