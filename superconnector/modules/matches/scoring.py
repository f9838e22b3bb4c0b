"""Pluggable top-match scoring.

A scorer is a pure function ``(viewer, candidate) -> float`` over two profiles.
The roster flags a candidate as a top match when its score reaches the
configured threshold. No scoring policy is built in: ``no_match`` is the
default and ``stored_scorer`` replays scores computed elsewhere.
"""
from typing import Callable, Dict, Optional, Tuple

from superconnector.modules.profiles.schemas import ProfileResponse

Scorer = Callable[[ProfileResponse, ProfileResponse], float]


def no_match(viewer: ProfileResponse, candidate: ProfileResponse) -> float:
    return 0.0


def stored_scorer(scores: Dict[str, float]) -> Scorer:
    """Scorer that looks the candidate up in a precomputed ``{user_id: score}`` map."""
    def score(viewer: ProfileResponse, candidate: ProfileResponse) -> float:
        return scores.get(candidate.id, 0.0)
    return score


def rate(
    viewer: Optional[ProfileResponse],
    candidate: ProfileResponse,
    scorer: Scorer,
    threshold: float,
) -> Tuple[bool, Optional[float]]:
    """Return ``(is_top_match, score)``; anonymous viewers and self-matches score nothing."""
    if viewer is None or viewer.id == candidate.id:
        return False, None
    score = float(scorer(viewer, candidate))
    return score > 0 and score >= threshold, score
