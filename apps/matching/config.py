"""Matching policy constants and the runtime configuration injected into the pipeline."""
from dataclasses import dataclass

from django.conf import settings

# Policy constants (product decisions, not deployment settings)
CANDIDATE_LIMIT = 20
TOP_N = 10
HIGH_SCORE_THRESHOLD = 80
BASELINE_MIN = 30.0
BASELINE_SPAN = 40.0
BASELINE_REASONS = (
    "Profil compatible",
    "Potentiel de collaboration",
    "Objectifs alignés",
)
MAX_REASONS = 3


@dataclass(frozen=True)
class MatchingConfig:
    """Credentials and LLM parameters for one pipeline run."""

    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"
    openai_base_url: str | None = None
    request_timeout: float = 60.0
    temperature: float = 0.3
    max_tokens: int = 2000

    @classmethod
    def from_settings(cls) -> "MatchingConfig":
        return cls(
            openai_api_key=settings.OPENAI_API_KEY,
            openai_model=settings.OPENAI_MODEL,
            openai_base_url=settings.OPENAI_BASE_URL or None,
            request_timeout=settings.OPENAI_TIMEOUT,
        )

    @property
    def ai_enabled(self) -> bool:
        return bool(self.openai_api_key)
