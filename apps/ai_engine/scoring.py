"""Compatibility scoring — one LLM call per matching run."""
import json
import logging
import math
import time
from collections.abc import Sequence

import openai

from apps.core.utils import strip_code_fences
from apps.matching.config import MAX_REASONS, MatchingConfig
from apps.matching.types import NOT_PROVIDED, AIScore, Candidate, MatchRequest

from . import prompts

logger = logging.getLogger(__name__)


def _get_client(config: MatchingConfig) -> openai.OpenAI:
    return openai.OpenAI(
        api_key=config.openai_api_key,
        base_url=config.openai_base_url,
        timeout=config.request_timeout,
        max_retries=0,
    )


def build_prompt(requester, candidates: Sequence[Candidate], request: MatchRequest) -> str:
    """User prompt describing the requester and every candidate (0-based index)."""
    template = (
        prompts.INVESTOR_USER
        if request.requesting_user_role == "investor"
        else prompts.ENTREPRENEUR_USER
    )
    return template.format(
        full_name=requester.full_name,
        bio=requester.bio or NOT_PROVIDED,
        location=requester.location or NOT_PROVIDED,
        company=requester.company or NOT_PROVIDED,
        preferences=json.dumps(request.preferences.as_dict(), ensure_ascii=False),
        candidates="\n\n".join(c.prompt_block(i) for i, c in enumerate(candidates)),
        response_format=prompts.RESPONSE_FORMAT,
    )


def parse_scores(content: str, candidate_count: int) -> dict[int, AIScore]:
    """Parse the LLM reply into {candidate_index: AIScore}.

    Entries with an unknown index or a non-numeric score are dropped so the
    corresponding candidate falls back to the baseline score.
    """
    try:
        data = json.loads(strip_code_fences(content))
    except ValueError:
        # JSONDecodeError, or an integer literal over the int-conversion digit limit
        logger.warning("LLM response is not valid JSON: %s", content[:200])
        return {}

    entries = data.get("matches") if isinstance(data, dict) else None
    if not isinstance(entries, list):
        logger.warning("LLM response has no 'matches' list: %s", content[:200])
        return {}

    scores: dict[int, AIScore] = {}
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        index = entry.get("candidate_index", entry.get("projectIndex"))
        score = entry.get("score")
        if isinstance(index, bool) or not isinstance(index, int):
            continue
        if not 0 <= index < candidate_count:
            continue
        if isinstance(score, bool) or not isinstance(score, (int, float)):
            continue
        try:
            value = float(score)
        except OverflowError:
            continue
        if not math.isfinite(value):
            continue

        reasons = entry.get("reasons")
        if not isinstance(reasons, list):
            reasons = []
        reasons = tuple(str(r) for r in reasons if r)[:MAX_REASONS]

        scores[index] = AIScore(score=min(100.0, max(0.0, value)), reasons=reasons)
    return scores


class CompatibilityScorer:
    """Asks the completion API for a 0-100 score and reasons per candidate.

    Every failure (no key, network, non-2xx, malformed output) degrades to an
    empty mapping; callers fall back to baseline scores.
    """

    def __init__(self, config: MatchingConfig):
        self.config = config

    def score(
        self, requester, candidates: Sequence[Candidate], request: MatchRequest
    ) -> dict[int, AIScore]:
        if not candidates:
            return {}
        if not self.config.ai_enabled:
            logger.warning("OPENAI_API_KEY not configured, skipping AI scoring")
            return {}

        user_prompt = build_prompt(requester, candidates, request)
        start = time.time()
        try:
            resp = _get_client(self.config).chat.completions.create(
                model=self.config.openai_model,
                messages=[
                    {"role": "system", "content": prompts.MATCHING_SYSTEM},
                    {"role": "user", "content": user_prompt},
                ],
                temperature=self.config.temperature,
                max_tokens=self.config.max_tokens,
            )
        except openai.OpenAIError:
            logger.exception("Completion API call failed, falling back to baseline scores")
            return {}
        elapsed_ms = int((time.time() - start) * 1000)

        content = resp.choices[0].message.content if resp.choices else None
        if not content:
            logger.warning("Completion API returned an empty response")
            return {}

        scores = parse_scores(content, len(candidates))
        tokens = resp.usage.total_tokens if resp.usage else 0
        logger.info(
            "AI scoring: %d/%d candidates scored (%d tokens, %dms)",
            len(scores), len(candidates), tokens, elapsed_ms,
        )
        return scores
