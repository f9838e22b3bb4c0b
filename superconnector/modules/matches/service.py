import logging
from supabase import Client
from superconnector.modules.matches.scoring import Scorer, no_match, stored_scorer
from superconnector.database.store import execute, rows, MATCHES_TABLE
from superconnector.core.exceptions import PersistenceError
from typing import Dict, Optional

logger = logging.getLogger(__name__)

STRATEGIES = ("none", "stored")


class MatchService:
    def __init__(self, supabase: Client, strategy: str = "none"):
        if strategy not in STRATEGIES:
            raise ValueError(f"Unknown match strategy: {strategy}")
        self.supabase = supabase
        self.strategy = strategy

    def load_scores(self, event_id: str, viewer_id: str) -> Dict[str, float]:
        """Precomputed scores for one viewer at one event, keyed by candidate ID"""
        result = execute(
            self.supabase.table(MATCHES_TABLE)
            .select("match_id, match_score")
            .eq("event_id", event_id)
            .eq("user_id", viewer_id),
            "load attendee matches"
        )
        scores = {}
        for row in rows(result):
            if row.get("match_id") is None or row.get("match_score") is None:
                continue
            # Keep the best score if the job wrote a pair more than once
            scores[row["match_id"]] = max(float(row["match_score"]), scores.get(row["match_id"], 0.0))
        return scores

    def scorer_for(self, event_id: str, viewer_id: Optional[str]) -> Scorer:
        """Scorer for a roster build; falls back to no_match rather than failing"""
        if self.strategy == "none" or viewer_id is None:
            return no_match
        try:
            return stored_scorer(self.load_scores(event_id, viewer_id))
        except PersistenceError:
            logger.warning(f"Match scores unavailable for event {event_id}, viewer {viewer_id}; no top matches")
            return no_match
