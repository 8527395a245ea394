"""Ranking aggregator — merges AI scores with baseline scores."""
import random
from collections.abc import Mapping, Sequence

from .config import BASELINE_MIN, BASELINE_REASONS, BASELINE_SPAN, TOP_N
from .types import AIScore, Candidate, ScoredMatch


def baseline_score(rng: random.Random) -> float:
    """Uniform in [30, 70)."""
    return BASELINE_MIN + rng.random() * BASELINE_SPAN


def rank_candidates(
    candidates: Sequence[Candidate],
    ai_scores: Mapping[int, AIScore],
    rng: random.Random,
    top_n: int = TOP_N,
) -> list[ScoredMatch]:
    """Score every candidate, sort by score desc and keep the top ``top_n``.

    ``sorted`` is stable, so equal scores keep fetch order.
    """
    scored = []
    for index, candidate in enumerate(candidates):
        ai = ai_scores.get(index)
        if ai is not None:
            scored.append(ScoredMatch(
                candidate=candidate,
                score=ai.score,
                reasons=ai.reasons or BASELINE_REASONS,
                ai_derived=True,
            ))
        else:
            scored.append(ScoredMatch(
                candidate=candidate,
                score=baseline_score(rng),
                reasons=BASELINE_REASONS,
                ai_derived=False,
            ))

    ranked = sorted(scored, key=lambda m: m.score, reverse=True)
    return ranked[:top_n]
