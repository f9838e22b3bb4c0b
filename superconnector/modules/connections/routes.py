from fastapi import APIRouter, Depends
from superconnector.database.supabase_client import get_supabase
from superconnector.modules.connections.schemas import ConnectionCreate, ConnectionResponse
from superconnector.modules.connections.service import ConnectionService
from superconnector.modules.auth.schemas import Session
from superconnector.core.dependencies import get_session
from supabase import Client
from typing import List

router = APIRouter(prefix="/connections", tags=["connections"])


def get_connection_service(supabase: Client = Depends(get_supabase)) -> ConnectionService:
    return ConnectionService(supabase)


@router.post("", response_model=ConnectionResponse, status_code=201)
async def request_intro(
    data: ConnectionCreate,
    session: Session = Depends(get_session),
    service: ConnectionService = Depends(get_connection_service)
):
    """Request an intro to another attendee"""
    return service.request_intro(data, session)


@router.get("", response_model=List[ConnectionResponse])
async def list_connections(
    limit: int = 50,
    offset: int = 0,
    session: Session = Depends(get_session),
    service: ConnectionService = Depends(get_connection_service)
):
    return service.list_connections(session.user_id, limit=limit, offset=offset)
