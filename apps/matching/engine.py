"""Matching engine — fetch, score, rank, persist and notify in one pass."""
import logging
import random
from collections.abc import Sequence

from django.db import DatabaseError, transaction
from django.utils import timezone

from apps.ai_engine import prompts
from apps.ai_engine.scoring import CompatibilityScorer
from apps.notifications.services import notify_high_quality_matches
from apps.profiles.models import Profile

from .candidates import fetch_candidates
from .config import MatchingConfig
from .models import AIMatch
from .ranking import rank_candidates
from .types import MatchRequest, MatchResult, Outcome, ScoredMatch

logger = logging.getLogger(__name__)


def persist_matches(
    profile: Profile,
    matches: Sequence[ScoredMatch],
    request: MatchRequest,
    model_name: str = "",
) -> list[Outcome]:
    """Upsert one AIMatch per ranked match. A failed row never stops the others."""
    outcomes = []
    preferences = request.preferences.as_dict()
    for match in matches:
        target_id = match.candidate.id
        try:
            with transaction.atomic():
                AIMatch.objects.update_or_create(
                    user=profile,
                    target_id=target_id,
                    target_type=match.candidate.target_type,
                    defaults={
                        "match_score": match.score,
                        "match_reasons": list(match.reasons),
                        "preferences_used": preferences,
                        "ai_derived": match.ai_derived,
                        "prompt_version": prompts.PROMPT_VERSION if match.ai_derived else "",
                        "model_name": model_name if match.ai_derived else "",
                    },
                )
        except DatabaseError as exc:
            outcomes.append(Outcome(ok=False, target_id=target_id, error=str(exc)))
        else:
            outcomes.append(Outcome(ok=True, target_id=target_id))
    return outcomes


def run_advanced_matching(
    request: MatchRequest,
    *,
    config: MatchingConfig | None = None,
    scorer: CompatibilityScorer | None = None,
    rng: random.Random | None = None,
) -> MatchResult:
    """Run the full pipeline for one request.

    Raises ``Profile.DoesNotExist`` for an unknown requester and propagates
    database errors from the candidate query. Scoring, persistence and
    notification failures are absorbed and logged.
    """
    config = config or MatchingConfig.from_settings()
    scorer = scorer or CompatibilityScorer(config)
    rng = rng or random.Random()

    profile = Profile.objects.get(pk=request.requesting_user_id)
    candidates = fetch_candidates(request)

    ai_scores = scorer.score(profile, candidates, request)
    ranked = rank_candidates(candidates, ai_scores, rng)

    persisted = persist_matches(profile, ranked, request, model_name=config.openai_model)
    for outcome in persisted:
        if not outcome.ok:
            logger.error(
                "Failed to save match %s for %s: %s",
                outcome.target_id, profile.pk, outcome.error,
            )

    notification = notify_high_quality_matches(profile, ranked, request.requesting_user_role)
    if notification is not None and not notification.ok:
        logger.error("Failed to create match notification for %s: %s", profile.pk, notification.error)

    result = MatchResult(
        matches=ranked,
        ai_analyzed=sum(1 for m in ranked if m.ai_derived),
        timestamp=timezone.now(),
        persisted=persisted,
        notification=notification,
    )
    logger.info(
        "Generated %d matches for %s (%d candidates, %d AI-analyzed, %d saved)",
        result.total, profile.pk, len(candidates), result.ai_analyzed,
        sum(1 for o in persisted if o.ok),
    )
    return result
