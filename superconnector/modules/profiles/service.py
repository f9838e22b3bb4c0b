from datetime import datetime, timezone
import logging
from supabase import Client
from superconnector.modules.profiles.schemas import ProfileUpdate, ProfileResponse, ProfileSummary
from superconnector.modules.auth.schemas import Session
from superconnector.database.store import execute, rows, first_row, PROFILES_TABLE
from superconnector.core.exceptions import Unauthenticated, Forbidden, NotFoundError
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


class ProfileService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def get_profile(self, user_id: str) -> Optional[ProfileResponse]:
        """Get a profile by user ID, or None when the user has never saved one"""
        result = execute(
            self.supabase.table(PROFILES_TABLE)
            .select("*")
            .eq("id", user_id)
            .limit(1),
            "load profile"
        )
        row = first_row(result)
        return ProfileResponse(**row) if row else None

    def get_profile_or_404(self, user_id: str) -> ProfileResponse:
        profile = self.get_profile(user_id)
        if profile is None:
            raise NotFoundError("Profile not found")
        return profile

    def get_profiles(self, user_ids: List[str]) -> Dict[str, ProfileResponse]:
        """Batch-load profiles keyed by user ID; missing users are simply absent"""
        if not user_ids:
            return {}
        result = execute(
            self.supabase.table(PROFILES_TABLE)
            .select("*")
            .in_("id", list(dict.fromkeys(user_ids))),
            "load profiles"
        )
        return {row["id"]: ProfileResponse(**row) for row in rows(result)}

    def list_profiles(self, limit: int = 50, offset: int = 0) -> List[ProfileSummary]:
        """List profiles ordered by name"""
        result = execute(
            self.supabase.table(PROFILES_TABLE)
            .select("id, name, bio, avatar_url, interests")
            .order("name")
            .limit(limit)
            .offset(offset),
            "list profiles"
        )
        return [ProfileSummary(**row) for row in rows(result)]

    def upsert_profile(self, user_id: str, data: ProfileUpdate, session: Optional[Session]) -> ProfileResponse:
        """Create or update the caller's own profile; only provided fields change"""
        if session is None:
            raise Unauthenticated("Sign in to edit your profile")
        if session.user_id != user_id:
            raise Forbidden("You can only edit your own profile")

        payload = data.model_dump(exclude_unset=True)
        payload["id"] = user_id
        payload["updated_at"] = datetime.now(timezone.utc).isoformat()

        result = execute(
            self.supabase.table(PROFILES_TABLE).upsert(payload, on_conflict="id"),
            "save profile"
        )
        row = first_row(result)
        if row is None:
            # Some PostgREST setups return no representation on upsert
            return self.get_profile_or_404(user_id)
        logger.info(f"Profile {user_id} saved ({', '.join(sorted(k for k in payload if k not in ('id', 'updated_at')))})")
        return ProfileResponse(**row)
