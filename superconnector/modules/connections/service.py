import logging
from supabase import Client
from superconnector.modules.connections.schemas import ConnectionCreate, ConnectionResponse
from superconnector.modules.auth.schemas import Session
from superconnector.database.store import execute, rows, first_row, CONNECTIONS_TABLE
from superconnector.core.exceptions import Unauthenticated, ValidationError, PersistenceError
from typing import List, Optional

logger = logging.getLogger(__name__)


class ConnectionService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def request_intro(self, data: ConnectionCreate, session: Optional[Session]) -> ConnectionResponse:
        """Record that the caller wants an intro; asking twice returns the existing row"""
        if session is None:
            raise Unauthenticated("Sign in to request an intro")
        if data.connection_id == session.user_id:
            raise ValidationError("You cannot request an intro to yourself")

        existing = first_row(execute(
            self.supabase.table(CONNECTIONS_TABLE)
            .select("*")
            .eq("user_id", session.user_id)
            .eq("connection_id", data.connection_id)
            .limit(1),
            "load connection"
        ))
        if existing:
            return ConnectionResponse(**existing)

        row = first_row(execute(
            self.supabase.table(CONNECTIONS_TABLE).insert({
                "user_id": session.user_id,
                "connection_id": data.connection_id
            }),
            "save connection"
        ))
        if row is None:
            raise PersistenceError("Could not save connection")
        logger.info(f"User {session.user_id} requested an intro to {data.connection_id}")
        return ConnectionResponse(**row)

    def list_connections(self, user_id: str, limit: int = 50, offset: int = 0) -> List[ConnectionResponse]:
        result = execute(
            self.supabase.table(CONNECTIONS_TABLE)
            .select("*")
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .limit(limit)
            .offset(offset),
            "list connections"
        )
        return [ConnectionResponse(**row) for row in rows(result)]
