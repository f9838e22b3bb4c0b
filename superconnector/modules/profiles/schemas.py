from pydantic import BaseModel, field_validator
from typing import Optional, List
from datetime import datetime


def normalise_interests(values: Optional[List[str]]) -> Optional[List[str]]:
    """Strip blanks and collapse duplicates (case-insensitive), keeping first spelling."""
    if values is None:
        return None
    seen = {}
    for value in values:
        term = (value or "").strip()
        if term and term.lower() not in seen:
            seen[term.lower()] = term
    return list(seen.values())


class ProfileUpdate(BaseModel):
    name: Optional[str] = None
    bio: Optional[str] = None
    interests: Optional[List[str]] = None
    twitter: Optional[str] = None
    phone: Optional[str] = None
    looking_for: Optional[str] = None
    avatar_url: Optional[str] = None

    @field_validator("interests")
    @classmethod
    def clean_interests(cls, v):
        return normalise_interests(v)

    @field_validator("twitter")
    @classmethod
    def strip_handle(cls, v):
        return v.strip().lstrip("@") if v is not None else v


class ProfileResponse(BaseModel):
    id: str
    name: Optional[str] = None
    bio: Optional[str] = None
    interests: List[str] = []
    twitter: Optional[str] = None
    phone: Optional[str] = None
    looking_for: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("interests", mode="before")
    @classmethod
    def default_interests(cls, v):
        return v or []

    class Config:
        from_attributes = True


class ProfileSummary(BaseModel):
    id: str
    name: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    interests: List[str] = []

    @field_validator("interests", mode="before")
    @classmethod
    def default_interests(cls, v):
        return v or []
