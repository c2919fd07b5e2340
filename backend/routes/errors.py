"""
Domain error -> HTTP error translation shared by the routers
"""
from fastapi import HTTPException

from app.common.errors import DomainError, InvalidStateError, NotFoundError, ValidationError

_STATUS_CODES = {
    ValidationError: 400,
    NotFoundError: 404,
    InvalidStateError: 409,
}


def to_http_exception(exc: DomainError) -> HTTPException:
    for error_type, status_code in _STATUS_CODES.items():
        if isinstance(exc, error_type):
            return HTTPException(status_code=status_code, detail=exc.message)
    return HTTPException(status_code=400, detail=exc.message)
