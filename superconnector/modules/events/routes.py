from fastapi import APIRouter, Depends
from superconnector.database.supabase_client import get_supabase
from superconnector.modules.events.schemas import EventCreate, EventResponse
from superconnector.modules.events.service import EventService
from superconnector.modules.auth.schemas import Session
from superconnector.core.dependencies import get_session
from supabase import Client
from typing import List, Optional

router = APIRouter(prefix="/events", tags=["events"])


def get_event_service(supabase: Client = Depends(get_supabase)) -> EventService:
    return EventService(supabase)


@router.post("", response_model=EventResponse, status_code=201)
async def create_event(
    event_data: EventCreate,
    session: Session = Depends(get_session),
    service: EventService = Depends(get_event_service)
):
    """Create a new event; the caller becomes its creator"""
    return service.create_event(event_data, session)


@router.get("", response_model=List[EventResponse])
async def list_events(
    limit: int = 20,
    offset: int = 0,
    creator_id: Optional[str] = None,
    upcoming: bool = True,
    service: EventService = Depends(get_event_service)
):
    """Events ordered by start time; pass upcoming=false to include ones that have ended"""
    return service.list_events(limit=limit, offset=offset, creator_id=creator_id, upcoming=upcoming)


@router.get("/{event_id}", response_model=EventResponse)
async def get_event(
    event_id: str,
    service: EventService = Depends(get_event_service)
):
    return service.get_event_or_404(event_id)
