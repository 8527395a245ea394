"""Candidate fetcher — counterparties eligible for a match request."""
import logging

from apps.profiles.models import Profile
from apps.projects.models import Project

from .config import CANDIDATE_LIMIT
from .types import Candidate, InvestorCandidate, MatchRequest, ProjectCandidate

logger = logging.getLogger(__name__)


def fetch_candidates(request: MatchRequest, limit: int = CANDIDATE_LIMIT) -> list[Candidate]:
    """Active projects for investors, investor profiles for entrepreneurs.

    Order is the model's default ordering; at most ``limit`` rows. Database
    errors propagate to the caller.
    """
    prefs = request.preferences

    if request.requesting_user_role == "investor":
        qs = Project.objects.filter(status=Project.Status.ACTIVE).select_related("owner")
        if prefs.sectors:
            qs = qs.filter(sector__in=prefs.sectors)
        if prefs.location:
            qs = qs.filter(location__icontains=prefs.location)
        if prefs.funding_range:
            low, high = prefs.funding_range
            qs = qs.filter(funding_goal__gte=low, funding_goal__lte=high)
        candidates = [ProjectCandidate.from_model(p) for p in qs[:limit]]
    else:
        qs = Profile.objects.filter(
            user_type=Profile.UserType.INVESTOR, is_active=True
        ).exclude(pk=request.requesting_user_id)
        if prefs.sectors:
            qs = qs.filter(sector__in=prefs.sectors)
        if prefs.location:
            qs = qs.filter(location__icontains=prefs.location)
        candidates = [InvestorCandidate.from_model(p) for p in qs[:limit]]

    logger.debug(
        "Fetched %d %s candidates for %s",
        len(candidates), request.target_type, request.requesting_user_id,
    )
    return candidates
