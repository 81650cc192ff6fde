"""
Standardized response utilities for the HTTP layer
"""

from typing import Any
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from event_roster.core.errors import RosterError
from event_roster.schemas.common import StandardResponse, ErrorResponse

def success_response(
    message: str,
    data: Any = None,
    status_code: int = 200
) -> JSONResponse:
    """Create standardized success response"""
    response = StandardResponse(
        success=True,
        message=message,
        data=jsonable_encoder(data)
    )
    return JSONResponse(
        content=response.model_dump(),
        status_code=status_code
    )

def error_response(exc: RosterError) -> JSONResponse:
    """Create standardized error response from a roster error

    ValidationError and DuplicateEmailError map to 400, NotFoundError to
    404 and storage failures to 500.
    """
    response = ErrorResponse(
        message=exc.message,
        error_code=exc.error_code,
        details=jsonable_encoder(exc.details)
    )
    return JSONResponse(
        content=response.model_dump(),
        status_code=exc.http_status
    )
