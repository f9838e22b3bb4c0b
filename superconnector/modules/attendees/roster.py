"""Attendee aggregation: joins going RSVPs with profiles into a display roster.

The two reads (attendance, then profiles) are not transactional; a profile
edited in between may or may not show up in the same build.
"""
import logging
from supabase import Client
from superconnector.modules.attendees.schemas import AttendeeView, RosterResponse, RsvpStatus
from superconnector.modules.profiles.schemas import ProfileResponse
from superconnector.modules.profiles.service import ProfileService
from superconnector.modules.matches.scoring import Scorer, rate
from superconnector.modules.matches.service import MatchService
from superconnector.database.store import execute, rows, ATTENDEES_TABLE
from superconnector.core.exceptions import PersistenceError
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


class RosterService:
    def __init__(
        self,
        supabase: Client,
        match_service: Optional[MatchService] = None,
        threshold: float = 0.5,
        anonymous_name: str = "Anonymous",
        anonymous_bio: str = "No bio available",
    ):
        self.supabase = supabase
        self.profiles = ProfileService(supabase)
        self.match_service = match_service or MatchService(supabase)
        self.threshold = threshold
        self.anonymous_name = anonymous_name
        self.anonymous_bio = anonymous_bio

    def going_user_ids(self, event_id: str) -> List[str]:
        """User IDs currently going, in order of their first RSVP"""
        result = execute(
            self.supabase.table(ATTENDEES_TABLE)
            .select("user_id, created_at")
            .eq("event_id", event_id)
            .eq("rsvp_status", RsvpStatus.going.value)
            .order("created_at"),
            "load attendees"
        )
        return list(dict.fromkeys(row["user_id"] for row in rows(result) if row.get("user_id")))

    def _load_profiles(self, user_ids: List[str]) -> Dict[str, ProfileResponse]:
        try:
            return self.profiles.get_profiles(user_ids)
        except PersistenceError:
            logger.warning(f"Profiles unavailable for {len(user_ids)} attendees; using placeholders")
            return {}

    def build_roster(
        self,
        event_id: str,
        viewer_user_id: Optional[str] = None,
        scorer: Optional[Scorer] = None,
    ) -> RosterResponse:
        """Build the roster of going attendees for an event, flagging top matches for the viewer.

        Only the attendance read can fail (PersistenceError). Missing profiles
        become placeholder entries and missing match data means no top matches.
        """
        user_ids = self.going_user_ids(event_id)
        if not user_ids:
            return RosterResponse(event_id=event_id, attendees=[], top_matches=[], total_count=0)

        lookup_ids = user_ids + [viewer_user_id] if viewer_user_id else user_ids
        profiles = self._load_profiles(lookup_ids)

        viewer = None
        if viewer_user_id:
            viewer = profiles.get(viewer_user_id) or ProfileResponse(id=viewer_user_id)
        if scorer is None:
            scorer = self.match_service.scorer_for(event_id, viewer_user_id)

        attendees = []
        for user_id in user_ids:
            profile = profiles.get(user_id)
            candidate = profile or ProfileResponse(id=user_id)
            is_top_match, score = rate(viewer, candidate, scorer, self.threshold)
            attendees.append(AttendeeView(
                user_id=user_id,
                name=candidate.name or self.anonymous_name,
                bio=candidate.bio or self.anonymous_bio,
                avatar_url=candidate.avatar_url,
                interests=candidate.interests,
                is_top_match=is_top_match,
                match_score=score
            ))

        missing = sum(1 for user_id in user_ids if user_id not in profiles)
        if missing:
            logger.debug(f"Event {event_id}: {missing} attendees without a profile")

        return RosterResponse(
            event_id=event_id,
            attendees=attendees,
            top_matches=[a for a in attendees if a.is_top_match],
            total_count=len(attendees)
        )
