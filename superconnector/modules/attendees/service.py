from datetime import datetime, timezone
import logging
from supabase import Client
from superconnector.modules.attendees.schemas import (
    RsvpStatus, AttendanceResponse, RsvpResult
)
from superconnector.modules.attendees.roster import RosterService
from superconnector.modules.events.service import EventService
from superconnector.modules.auth.schemas import Session
from superconnector.database.store import execute, first_row, is_uuid, ATTENDEES_TABLE
from superconnector.core.exceptions import (
    Unauthenticated, Forbidden, ValidationError, PersistenceError
)
from typing import Optional, Union

logger = logging.getLogger(__name__)


class RsvpService:
    """Records a user's RSVP for an event and keeps the roster in step with it.

    State per (event, user): no row (no response yet), then going / maybe /
    not_going. Every state can move to every other one, including itself;
    repeating a status still writes and refreshes ``updated_at``.
    """

    def __init__(self, supabase: Client, roster: Optional[RosterService] = None, events: Optional[EventService] = None):
        self.supabase = supabase
        self.roster = roster or RosterService(supabase)
        self.events = events or EventService(supabase)

    def get_attendance(self, event_id: str, user_id: str) -> Optional[AttendanceResponse]:
        if not is_uuid(event_id):
            return None
        result = execute(
            self.supabase.table(ATTENDEES_TABLE)
            .select("*")
            .eq("event_id", event_id)
            .eq("user_id", user_id)
            .limit(1),
            "load RSVP"
        )
        row = first_row(result)
        return AttendanceResponse(**row) if row else None

    def load_current_status(self, event_id: str, user_id: str) -> Optional[RsvpStatus]:
        """The user's stored RSVP status, or None when they have not responded"""
        attendance = self.get_attendance(event_id, user_id)
        return attendance.rsvp_status if attendance else None

    def submit_rsvp(
        self,
        event_id: str,
        user_id: str,
        status: Union[RsvpStatus, str],
        session: Optional[Session],
    ) -> RsvpResult:
        """Upsert the (event, user) RSVP row.

        When the status moves into or out of ``going`` the roster is rebuilt
        and returned with the result. No retries: store failures surface as
        PersistenceError.
        """
        if session is None:
            raise Unauthenticated("Sign in to RSVP")
        if session.user_id != user_id:
            raise Forbidden("You can only RSVP for yourself")
        if not event_id or not event_id.strip():
            raise ValidationError("event_id is required")
        try:
            status = RsvpStatus(status)
        except ValueError:
            raise ValidationError(f"Invalid RSVP status: {status}")

        self.events.get_event_or_404(event_id)
        previous = self.load_current_status(event_id, user_id)

        result = execute(
            self.supabase.table(ATTENDEES_TABLE).upsert({
                "event_id": event_id,
                "user_id": user_id,
                "rsvp_status": status.value,
                "updated_at": datetime.now(timezone.utc).isoformat()
            }, on_conflict="event_id,user_id"),
            "save RSVP"
        )
        row = first_row(result)
        attendance = AttendanceResponse(**row) if row else self.get_attendance(event_id, user_id)
        if attendance is None:
            raise PersistenceError("Could not save RSVP")

        logger.info(
            f"User {user_id} RSVP'd '{status.value}' to event {event_id}"
            f" (was {previous.value if previous else 'no response'})"
        )

        roster_changed = (previous == RsvpStatus.going) != (status == RsvpStatus.going)
        roster = None
        if roster_changed:
            try:
                roster = self.roster.build_roster(event_id, user_id)
            except PersistenceError:
                # The write went through; the caller can re-read the roster
                logger.warning(f"RSVP saved but roster refresh failed for event {event_id}")

        return RsvpResult(
            attendance=attendance,
            previous_status=previous,
            roster_changed=roster_changed,
            roster=roster
        )
