from fastapi import APIRouter, Depends
from superconnector.modules.auth.schemas import (
    MagicLinkRequest, MagicLinkResponse, VerifyOtpRequest, TokenResponse, Session
)
from superconnector.modules.auth.service import AuthService
from superconnector.core.dependencies import get_auth_service, get_session, get_current_token

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/magic-link", response_model=MagicLinkResponse, status_code=202)
async def send_magic_link(
    data: MagicLinkRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Send a magic link / one-time code; unknown addresses get an account"""
    return service.send_magic_link(data)


@router.post("/verify", response_model=TokenResponse)
async def verify(
    data: VerifyOtpRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Exchange the one-time code for an access token"""
    return service.verify_otp(data)


@router.post("/logout", status_code=200)
async def logout(
    token: str = Depends(get_current_token),
    service: AuthService = Depends(get_auth_service)
):
    service.logout(token)
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=Session, response_model_exclude={"access_token"})
async def me(session: Session = Depends(get_session)):
    return session
