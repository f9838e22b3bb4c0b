from enum import Enum
from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime


class RsvpStatus(str, Enum):
    going = "going"
    maybe = "maybe"
    not_going = "not_going"


class RsvpUpdate(BaseModel):
    rsvp_status: RsvpStatus


class AttendanceResponse(BaseModel):
    id: str
    event_id: str
    user_id: str
    rsvp_status: RsvpStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class RsvpStatusResponse(BaseModel):
    event_id: str
    user_id: str
    rsvp_status: Optional[RsvpStatus] = None  # None: no response yet


class AttendeeView(BaseModel):
    user_id: str
    name: str
    bio: str
    avatar_url: Optional[str] = None
    interests: List[str] = []
    is_top_match: bool = False
    match_score: Optional[float] = None


class RosterResponse(BaseModel):
    event_id: str
    attendees: List[AttendeeView]
    top_matches: List[AttendeeView]
    total_count: int


class RsvpResult(BaseModel):
    attendance: AttendanceResponse
    previous_status: Optional[RsvpStatus] = None
    roster_changed: bool
    roster: Optional[RosterResponse] = None
