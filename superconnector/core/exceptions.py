"""Domain errors raised by services and rendered by the API's exception handler."""

from fastapi import status


class SuperconnectorError(Exception):
    """Base class for recoverable domain errors."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    detail: str = "superconnector_error"

    def __init__(self, detail: str = None):
        super().__init__(detail or self.detail)
        if detail:
            self.detail = detail


class Unauthenticated(SuperconnectorError):
    """No valid session exists; the caller should prompt for sign-in."""

    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "unauthenticated"


class Forbidden(SuperconnectorError):
    status_code = status.HTTP_403_FORBIDDEN
    detail = "forbidden"


class NotFoundError(SuperconnectorError):
    status_code = status.HTTP_404_NOT_FOUND
    detail = "not_found"


class ValidationError(SuperconnectorError):
    """Input problems not caught by request schema validation."""

    status_code = 422
    detail = "validation_error"


class PersistenceError(SuperconnectorError):
    """The store could not complete a read or write. Safe to retry by the user."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    detail = "persistence_error"
