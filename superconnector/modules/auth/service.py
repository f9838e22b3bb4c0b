import hashlib
import logging
import re
import time
from supabase import Client
from superconnector.modules.auth.schemas import (
    MagicLinkRequest, MagicLinkResponse, VerifyOtpRequest, TokenResponse, Session
)
from superconnector.config.settings import settings
from superconnector.core.exceptions import Unauthenticated, ValidationError, PersistenceError
from typing import Dict, Optional

logger = logging.getLogger(__name__)

# In-memory cache for get_session to reduce Supabase auth calls (e.g. many parallel requests with same token)
_AUTH_SESSION_CACHE: Dict[str, tuple] = {}
_AUTH_CACHE_TTL_SEC = 60
_AUTH_CACHE_MAX_SIZE = 500


def clear_session_cache():
    _AUTH_SESSION_CACHE.clear()


def phone_to_email(phone: str) -> str:
    """Map a phone number to the sign-in address used for phone sign-ups."""
    digits = re.sub(r"\D", "", phone or "")
    if not digits:
        raise ValidationError("Phone number must contain digits")
    return f"{digits}@{settings.phone_email_domain}"


class AuthService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def _resolve_email(self, email: Optional[str], phone: Optional[str]) -> str:
        return str(email) if email else phone_to_email(phone)

    def send_magic_link(self, data: MagicLinkRequest) -> MagicLinkResponse:
        """Send a magic link / one-time code, creating the account on first use"""
        email = self._resolve_email(data.email, data.phone)
        user_metadata = {}
        if data.name:
            user_metadata["name"] = data.name
        if data.phone:
            user_metadata["phone"] = data.phone
        try:
            self.supabase.auth.sign_in_with_otp({
                "email": email,
                "options": {
                    "email_redirect_to": settings.site_url,
                    "should_create_user": True,
                    "data": user_metadata
                }
            })
        except Exception as e:
            error_message = str(e)
            logger.error(f"Magic link request failed for {email}: {error_message}")
            if "rate limit" in error_message.lower():
                raise ValidationError("Too many sign-in attempts, try again later")
            raise PersistenceError("Could not send magic link") from e
        return MagicLinkResponse(email=email, message="Check your email for a magic link to sign in")

    def verify_otp(self, data: VerifyOtpRequest) -> TokenResponse:
        """Exchange the emailed one-time code for an access token"""
        email = self._resolve_email(data.email, data.phone)
        try:
            auth_response = self.supabase.auth.verify_otp({
                "email": email,
                "token": data.token,
                "type": "email"
            })
        except Exception as e:
            logger.info(f"OTP verification failed for {email}: {e}")
            raise Unauthenticated("Invalid or expired code") from e

        if not auth_response or not auth_response.user or not auth_response.session:
            raise Unauthenticated("Invalid or expired code")

        return TokenResponse(
            access_token=auth_response.session.access_token,
            token_type="bearer",
            user_id=auth_response.user.id,
            email=auth_response.user.email or email
        )

    def get_session(self, token: str) -> Session:
        """Resolve a bearer token to a Session. Uses short TTL cache to reduce auth API calls."""
        cache_key = hashlib.sha256(token.encode()).hexdigest()
        now = time.monotonic()
        if cache_key in _AUTH_SESSION_CACHE:
            session, expiry = _AUTH_SESSION_CACHE[cache_key]
            if now < expiry:
                return session
            del _AUTH_SESSION_CACHE[cache_key]
        try:
            user_response = self.supabase.auth.get_user(jwt=token)
        except Exception as e:
            error_msg = str(e)
            if "JWT" in error_msg or "expired" in error_msg.lower() or "invalid" in error_msg.lower():
                raise Unauthenticated("Invalid or expired token") from e
            raise Unauthenticated("Authentication failed") from e
        if not user_response or not user_response.user:
            raise Unauthenticated("Invalid or expired token")
        user = user_response.user
        session = Session(
            user_id=user.id,
            email=user.email,
            access_token=token,
            user_metadata=user.user_metadata or {}
        )
        if len(_AUTH_SESSION_CACHE) < _AUTH_CACHE_MAX_SIZE:
            _AUTH_SESSION_CACHE[cache_key] = (session, now + _AUTH_CACHE_TTL_SEC)
        return session

    def logout(self, token: str) -> bool:
        """Sign out and drop the cached session for this token"""
        _AUTH_SESSION_CACHE.pop(hashlib.sha256(token.encode()).hexdigest(), None)
        try:
            # Tokens are stateless JWTs; they still expire on their own
            self.supabase.auth.sign_out()
            return True
        except Exception as e:
            logger.warning(f"Sign out failed: {e}")
            return False
