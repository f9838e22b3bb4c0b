"""
Core dependencies for resolving the caller's session
"""

from fastapi import Depends, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from superconnector.database.supabase_client import get_supabase
from superconnector.modules.auth.service import AuthService
from superconnector.modules.auth.schemas import Session
from superconnector.core.exceptions import Unauthenticated
from supabase import Client
from typing import Optional
import logging

logger = logging.getLogger(__name__)

# auto_error=False so a missing header reaches us as None and maps to Unauthenticated (401)
security = HTTPBearer(auto_error=False)


def get_auth_service(supabase: Client = Depends(get_supabase)) -> AuthService:
    return AuthService(supabase)


def get_optional_session(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security),
    auth_service: AuthService = Depends(get_auth_service)
) -> Optional[Session]:
    """Session for the bearer token, or None for anonymous callers"""
    if credentials is None:
        return None
    return auth_service.get_session(credentials.credentials)


def get_session(session: Optional[Session] = Depends(get_optional_session)) -> Session:
    """Session for the bearer token; anonymous callers are rejected"""
    if session is None:
        raise Unauthenticated("Sign in to continue")
    return session


def get_current_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security)
) -> str:
    """Extract JWT token from Authorization header"""
    if credentials is None:
        raise Unauthenticated("Sign in to continue")
    return credentials.credentials
