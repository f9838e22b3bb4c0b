from datetime import datetime, timezone
import logging
from supabase import Client
from superconnector.modules.events.schemas import EventCreate, EventResponse
from superconnector.modules.auth.schemas import Session
from superconnector.database.store import execute, rows, first_row, is_uuid, EVENTS_TABLE
from superconnector.core.exceptions import Unauthenticated, NotFoundError, PersistenceError
from typing import List, Optional

logger = logging.getLogger(__name__)


class EventService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def create_event(self, event_data: EventCreate, session: Optional[Session]) -> EventResponse:
        """Create an event owned by the session user"""
        if session is None:
            raise Unauthenticated("Sign in to create an event")
        result = execute(
            self.supabase.table(EVENTS_TABLE).insert({
                "title": event_data.title,
                "description": event_data.description,
                "location": event_data.location,
                "start_time": event_data.start_time.isoformat(),
                "end_time": event_data.end_time.isoformat(),
                "creator_id": session.user_id
            }),
            "create event"
        )
        row = first_row(result)
        if row is None:
            raise PersistenceError("Could not create event")
        logger.info(f"Event {row['id']} created by {session.user_id}")
        return EventResponse(**row)

    def get_event(self, event_id: str) -> Optional[EventResponse]:
        """Get an event by ID; a malformed ID cannot exist, so it is None too"""
        if not is_uuid(event_id):
            return None
        result = execute(
            self.supabase.table(EVENTS_TABLE)
            .select("*")
            .eq("id", event_id)
            .limit(1),
            "load event"
        )
        row = first_row(result)
        return EventResponse(**row) if row else None

    def get_event_or_404(self, event_id: str) -> EventResponse:
        event = self.get_event(event_id)
        if event is None:
            raise NotFoundError("Event not found")
        return event

    def list_events(
        self,
        limit: int = 20,
        offset: int = 0,
        creator_id: Optional[str] = None,
        upcoming: bool = True
    ) -> List[EventResponse]:
        """List events by start time; by default only those that have not ended yet"""
        if creator_id is not None and not is_uuid(creator_id):
            return []
        query = self.supabase.table(EVENTS_TABLE).select("*")
        if creator_id:
            query = query.eq("creator_id", creator_id)
        if upcoming:
            query = query.gte("end_time", datetime.now(timezone.utc).isoformat())
        result = execute(
            query.order("start_time").limit(limit).offset(offset),
            "list events"
        )
        return [EventResponse(**row) for row in rows(result)]
