"""Thin helpers around Supabase query execution.

Every read or write against the hosted tables goes through ``execute`` so a
transport failure, timeout or PostgREST error reaches callers as a single
``PersistenceError`` instead of a driver-specific exception.
"""
import logging
import uuid
from typing import Any, Dict, List, Optional

from superconnector.core.exceptions import PersistenceError

logger = logging.getLogger(__name__)

PROFILES_TABLE = "superconnector_profiles"
EVENTS_TABLE = "superconnector_events"
ATTENDEES_TABLE = "superconnector_attendees"
MATCHES_TABLE = "superconnector_attendee_matches"
CONNECTIONS_TABLE = "connections"


def execute(query, action: str):
    """Run a built query; ``action`` reads like "load attendees"."""
    try:
        return query.execute()
    except Exception as e:
        logger.error(f"Store error while trying to {action}: {e}")
        raise PersistenceError(f"Could not {action}") from e


def is_uuid(value) -> bool:
    """Row ids are uuids; PostgREST rejects anything else with a 400."""
    try:
        uuid.UUID(str(value))
        return True
    except ValueError:
        return False


def rows(result) -> List[Dict[str, Any]]:
    if result is None or not result.data:
        return []
    return list(result.data)


def first_row(result) -> Optional[Dict[str, Any]]:
    data = rows(result)
    return data[0] if data else None
