"""Value types flowing through the matching pipeline.

Nothing here touches the database: candidates are snapshots built from ORM
rows by the fetcher, so scoring and ranking can be exercised in isolation.
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Literal, Union

from apps.core.utils import truncate

Role = Literal["investor", "entrepreneur"]

NOT_PROVIDED = "Non renseigné"


@dataclass(frozen=True)
class Preferences:
    sectors: tuple[str, ...] = ()
    location: str | None = None
    funding_range: tuple[float, float] | None = None

    @classmethod
    def from_dict(cls, data: dict | None) -> Preferences:
        data = data or {}
        funding = data.get("fundingRange") or data.get("funding_range")
        return cls(
            sectors=tuple(data.get("sectors") or ()),
            location=data.get("location") or None,
            funding_range=(float(funding[0]), float(funding[1])) if funding else None,
        )

    def as_dict(self) -> dict:
        """JSON form stored alongside each persisted match."""
        return {
            "sectors": list(self.sectors),
            "location": self.location,
            "fundingRange": list(self.funding_range) if self.funding_range else None,
        }


@dataclass(frozen=True)
class MatchRequest:
    requesting_user_id: uuid.UUID
    requesting_user_role: Role
    preferences: Preferences = field(default_factory=Preferences)

    @property
    def target_type(self) -> str:
        return "project" if self.requesting_user_role == "investor" else "profile"


def _amount(value: Decimal | None) -> str:
    if value is None:
        return NOT_PROVIDED
    return f"€{value:,.0f}"


@dataclass(frozen=True)
class ProjectCandidate:
    """Active project offered to an investor."""

    id: uuid.UUID
    title: str
    sector: str
    description: str = ""
    funding_goal: Decimal | None = None
    location: str = ""
    stage: str = ""
    risk_level: str = ""
    expected_roi: Decimal | None = None
    owner_id: uuid.UUID | None = None
    owner_name: str = ""
    target_type: Literal["project"] = "project"

    @property
    def label(self) -> str:
        return self.title

    @classmethod
    def from_model(cls, project) -> ProjectCandidate:
        return cls(
            id=project.pk,
            title=project.title,
            sector=project.sector,
            description=project.description,
            funding_goal=project.funding_goal,
            location=project.location,
            stage=project.stage,
            risk_level=project.risk_level,
            expected_roi=project.expected_roi,
            owner_id=project.owner_id,
            owner_name=project.owner.full_name,
        )

    def prompt_block(self, index: int) -> str:
        roi = f"{self.expected_roi}%" if self.expected_roi is not None else NOT_PROVIDED
        return (
            f"{index}. {self.title}\n"
            f"   - Secteur: {self.sector}\n"
            f"   - Description: {truncate(self.description or NOT_PROVIDED, 200)}\n"
            f"   - Financement: {_amount(self.funding_goal)}\n"
            f"   - Lieu: {self.location or NOT_PROVIDED}\n"
            f"   - Entrepreneur: {self.owner_name or NOT_PROVIDED}\n"
            f"   - Stade: {self.stage or NOT_PROVIDED}\n"
            f"   - Risque: {self.risk_level or NOT_PROVIDED}\n"
            f"   - ROI attendu: {roi}"
        )

    def as_payload(self) -> dict:
        return {
            "id": str(self.id),
            "title": self.title,
            "sector": self.sector,
            "description": self.description,
            "funding_goal": float(self.funding_goal) if self.funding_goal is not None else None,
            "location": self.location,
            "stage": self.stage,
            "risk_level": self.risk_level,
            "expected_roi": float(self.expected_roi) if self.expected_roi is not None else None,
            "owner": {"id": str(self.owner_id) if self.owner_id else None, "full_name": self.owner_name},
        }


@dataclass(frozen=True)
class InvestorCandidate:
    """Investor profile offered to an entrepreneur."""

    id: uuid.UUID
    full_name: str
    company: str = ""
    bio: str = ""
    location: str = ""
    sector: str = ""
    target_type: Literal["profile"] = "profile"

    @property
    def label(self) -> str:
        return self.full_name

    @classmethod
    def from_model(cls, profile) -> InvestorCandidate:
        return cls(
            id=profile.pk,
            full_name=profile.full_name,
            company=profile.company,
            bio=profile.bio,
            location=profile.location,
            sector=profile.sector,
        )

    def prompt_block(self, index: int) -> str:
        return (
            f"{index}. {self.full_name}\n"
            f"   - Entreprise: {self.company or NOT_PROVIDED}\n"
            f"   - Secteur: {self.sector or NOT_PROVIDED}\n"
            f"   - Bio: {truncate(self.bio or NOT_PROVIDED, 200)}\n"
            f"   - Localisation: {self.location or NOT_PROVIDED}"
        )

    def as_payload(self) -> dict:
        return {
            "id": str(self.id),
            "full_name": self.full_name,
            "company": self.company,
            "bio": self.bio,
            "location": self.location,
            "sector": self.sector,
        }


Candidate = Union[ProjectCandidate, InvestorCandidate]


@dataclass(frozen=True)
class AIScore:
    score: float
    reasons: tuple[str, ...]


@dataclass(frozen=True)
class ScoredMatch:
    candidate: Candidate
    score: float
    reasons: tuple[str, ...]
    ai_derived: bool

    def as_payload(self) -> dict:
        return {
            **self.candidate.as_payload(),
            "targetType": self.candidate.target_type,
            "matchScore": self.score,
            "reasons": list(self.reasons),
            "aiAnalyzed": self.ai_derived,
        }


@dataclass(frozen=True)
class Outcome:
    """Result of a best-effort side effect. Failures are reported, not raised."""

    ok: bool
    target_id: uuid.UUID | None = None
    error: str = ""


@dataclass
class MatchResult:
    matches: list[ScoredMatch]
    ai_analyzed: int
    timestamp: datetime
    persisted: list[Outcome] = field(default_factory=list)
    notification: Outcome | None = None

    @property
    def total(self) -> int:
        return len(self.matches)

    def as_payload(self) -> dict:
        return {
            "success": True,
            "matches": [m.as_payload() for m in self.matches],
            "total": self.total,
            "aiAnalyzed": self.ai_analyzed,
            "timestamp": self.timestamp.isoformat(),
        }
