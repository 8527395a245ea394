"""Shared fixtures for tests."""
import json
import random
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from rest_framework.test import APIClient

from apps.matching.config import MatchingConfig
from apps.matching.types import AIScore
from apps.profiles.models import Profile
from apps.projects.models import Project


class StubScorer:
    """Deterministic scorer keyed by candidate label (project title or investor name)."""

    def __init__(self, scores: dict[str, float], reasons=("Raison IA 1", "Raison IA 2")):
        self.scores = scores
        self.reasons = tuple(reasons)
        self.calls = 0

    def score(self, requester, candidates, request):
        self.calls += 1
        result = {}
        for index, candidate in enumerate(candidates):
            if candidate.label in self.scores:
                result[index] = AIScore(score=self.scores[candidate.label], reasons=self.reasons)
        return result


def make_completion(content, total_tokens=321):
    """Build an object shaped like an OpenAI chat completion response."""
    if not isinstance(content, str):
        content = json.dumps(content)
    resp = MagicMock()
    resp.choices = [MagicMock(message=MagicMock(content=content))]
    resp.usage = MagicMock(total_tokens=total_tokens)
    return resp


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def matching_config():
    return MatchingConfig(openai_api_key="sk-test", openai_model="gpt-4o-mini")


@pytest.fixture
def investor(db):
    return Profile.objects.create(
        full_name="Claire Investit",
        user_type=Profile.UserType.INVESTOR,
        company="Capital Lyon",
        bio="Business angel spécialisée dans la tech",
        location="Lyon",
        sector="technology",
    )


@pytest.fixture
def entrepreneur(db):
    return Profile.objects.create(
        full_name="Marc Fondateur",
        user_type=Profile.UserType.ENTREPRENEUR,
        company="AgriTech SAS",
        bio="Fondateur d'une startup agricole",
        location="Bordeaux",
        sector="agriculture",
    )


@pytest.fixture
def make_project(db, entrepreneur):
    def _make(title, sector="technology", funding_goal=100000, location="Paris",
              status=Project.Status.ACTIVE, **kwargs):
        return Project.objects.create(
            owner=entrepreneur,
            title=title,
            description=f"Description de {title}",
            sector=sector,
            funding_goal=Decimal(funding_goal),
            location=location,
            status=status,
            **kwargs,
        )
    return _make


@pytest.fixture
def make_investor(db):
    def _make(full_name, sector="technology", location="Paris", is_active=True):
        return Profile.objects.create(
            full_name=full_name,
            user_type=Profile.UserType.INVESTOR,
            sector=sector,
            location=location,
            is_active=is_active,
        )
    return _make


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def auth_client(db, django_user_model, investor):
    """Authenticated API client whose user owns the ``investor`` profile."""
    user = django_user_model.objects.create_user(username="claire", password="testpass123")
    investor.user = user
    investor.save(update_fields=["user"])
    client = APIClient()
    client.force_authenticate(user=user)
    return client
