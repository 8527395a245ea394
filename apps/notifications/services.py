"""Notification creation for matching results."""
import logging
from collections.abc import Sequence

from django.db import DatabaseError, transaction

from apps.matching.config import HIGH_SCORE_THRESHOLD
from apps.matching.types import Outcome, ScoredMatch
from apps.profiles.models import Profile

from .models import Notification

logger = logging.getLogger(__name__)


def notify_high_quality_matches(
    profile: Profile, matches: Sequence[ScoredMatch], role: str
) -> Outcome | None:
    """Insert one ``new_match`` notification summarising matches scored above 80.

    Returns ``None`` when no match qualifies.
    """
    high_quality = [m for m in matches if m.score > HIGH_SCORE_THRESHOLD]
    if not high_quality:
        return None

    count = len(high_quality)
    average = round(sum(m.score for m in high_quality) / count)
    kind = "projet(s)" if role == "investor" else "investisseur(s)"

    try:
        with transaction.atomic():
            notification = Notification.objects.create(
                recipient=profile,
                type=Notification.Type.NEW_MATCH,
                title="🎯 Nouveaux matches de qualité !",
                message=(
                    f"Nous avons trouvé {count} {kind} très compatibles avec votre profil."
                ),
                data={"matchCount": count, "averageScore": average},
            )
    except DatabaseError as exc:
        return Outcome(ok=False, target_id=profile.pk, error=str(exc))

    _enqueue_delivery(notification)
    return Outcome(ok=True, target_id=notification.pk)


def _enqueue_delivery(notification: Notification) -> None:
    from .tasks import deliver_notification

    try:
        deliver_notification.delay(str(notification.pk))
    except Exception:
        # Broker down: the row stays PENDING and the periodic retry picks it up.
        logger.exception("Could not enqueue delivery for notification %s", notification.pk)
