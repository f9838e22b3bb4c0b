from fastapi import APIRouter, Depends
from superconnector.database.supabase_client import get_supabase
from superconnector.modules.profiles.schemas import ProfileUpdate, ProfileResponse, ProfileSummary
from superconnector.modules.profiles.service import ProfileService
from superconnector.modules.auth.schemas import Session
from superconnector.core.dependencies import get_session
from supabase import Client
from typing import List

router = APIRouter(prefix="/profiles", tags=["profiles"])


def get_profile_service(supabase: Client = Depends(get_supabase)) -> ProfileService:
    return ProfileService(supabase)


@router.get("", response_model=List[ProfileSummary])
async def list_profiles(
    limit: int = 50,
    offset: int = 0,
    service: ProfileService = Depends(get_profile_service)
):
    """List profiles ordered by name"""
    return service.list_profiles(limit=limit, offset=offset)


@router.get("/me", response_model=ProfileResponse)
async def get_my_profile(
    session: Session = Depends(get_session),
    service: ProfileService = Depends(get_profile_service)
):
    return service.get_profile_or_404(session.user_id)


@router.put("/me", response_model=ProfileResponse)
async def upsert_my_profile(
    data: ProfileUpdate,
    session: Session = Depends(get_session),
    service: ProfileService = Depends(get_profile_service)
):
    """Create or update the caller's profile"""
    return service.upsert_profile(session.user_id, data, session)


@router.get("/{user_id}", response_model=ProfileResponse)
async def get_profile(
    user_id: str,
    service: ProfileService = Depends(get_profile_service)
):
    return service.get_profile_or_404(user_id)
