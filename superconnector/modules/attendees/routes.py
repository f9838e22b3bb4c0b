from fastapi import APIRouter, Depends
from superconnector.database.supabase_client import get_supabase
from superconnector.config.settings import settings
from superconnector.modules.attendees.schemas import (
    RsvpUpdate, RsvpResult, RsvpStatusResponse, RosterResponse
)
from superconnector.modules.attendees.service import RsvpService
from superconnector.modules.attendees.roster import RosterService
from superconnector.modules.events.service import EventService
from superconnector.modules.matches.service import MatchService
from superconnector.modules.auth.schemas import Session
from superconnector.core.dependencies import get_session, get_optional_session
from supabase import Client
from typing import Optional

router = APIRouter(prefix="/events", tags=["attendees"])


def get_roster_service(supabase: Client = Depends(get_supabase)) -> RosterService:
    return RosterService(
        supabase,
        match_service=MatchService(supabase, strategy=settings.match_strategy),
        threshold=settings.top_match_threshold,
        anonymous_name=settings.anonymous_name,
        anonymous_bio=settings.anonymous_bio
    )


def get_rsvp_service(
    supabase: Client = Depends(get_supabase),
    roster: RosterService = Depends(get_roster_service)
) -> RsvpService:
    return RsvpService(supabase, roster=roster, events=EventService(supabase))


@router.put("/{event_id}/rsvp", response_model=RsvpResult)
async def submit_rsvp(
    event_id: str,
    data: RsvpUpdate,
    session: Session = Depends(get_session),
    service: RsvpService = Depends(get_rsvp_service)
):
    """Set the caller's RSVP; includes the refreshed roster when going status changed"""
    return service.submit_rsvp(event_id, session.user_id, data.rsvp_status, session)


@router.get("/{event_id}/rsvp", response_model=RsvpStatusResponse)
async def get_rsvp(
    event_id: str,
    session: Session = Depends(get_session),
    service: RsvpService = Depends(get_rsvp_service)
):
    """The caller's current RSVP status; null when they have not responded"""
    return RsvpStatusResponse(
        event_id=event_id,
        user_id=session.user_id,
        rsvp_status=service.load_current_status(event_id, session.user_id)
    )


@router.get("/{event_id}/attendees", response_model=RosterResponse)
async def get_roster(
    event_id: str,
    session: Optional[Session] = Depends(get_optional_session),
    roster: RosterService = Depends(get_roster_service),
    supabase: Client = Depends(get_supabase)
):
    """Everyone going to the event; top matches are only computed for signed-in viewers"""
    EventService(supabase).get_event_or_404(event_id)
    return roster.build_roster(event_id, session.user_id if session else None)
