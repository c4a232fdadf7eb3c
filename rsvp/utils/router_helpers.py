# rsvp/utils/router_helpers.py

from fastapi import status
from fastapi.responses import JSONResponse
from typing import Callable
from functools import wraps
import logging

from ..schemas.common import ResponseFactory
from ..services.errors import (
    RSVPServiceError,
    StoreUnavailableError,
    RSVPValidationError,
    DuplicateIdentityError,
    FetchError,
    WriteError,
)
from .constants import ResponseMessages

logger = logging.getLogger(__name__)


def _error_response(status_code: int, error: RSVPServiceError) -> JSONResponse:
    details = None
    field = getattr(error, "field", None)
    if field:
        details = {"field": field}

    body = ResponseFactory.error(
        message=error.message, error_code=error.kind.value, details=details
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def handle_service_errors(func: Callable) -> Callable:
    """Decorator to standardize service error handling in routers"""

    @wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)

        # Store not configured/reachable -> 503 Service Unavailable
        except StoreUnavailableError as e:
            logger.error(f"Record store unavailable: {e.message}")
            return _error_response(status.HTTP_503_SERVICE_UNAVAILABLE, e)

        # Validation Errors -> 400 Bad Request
        except RSVPValidationError as e:
            logger.warning(f"Validation error ({e.kind.value}): {e.message}")
            return _error_response(status.HTTP_400_BAD_REQUEST, e)

        # Duplicate cédula -> 409 Conflict
        except DuplicateIdentityError as e:
            logger.warning(f"Duplicate submission: {e.message}")
            return _error_response(status.HTTP_409_CONFLICT, e)

        # Store-reported failures -> 502 Bad Gateway
        except (FetchError, WriteError) as e:
            logger.warning(f"Store error ({e.kind.value}): {e.message}")
            return _error_response(status.HTTP_502_BAD_GATEWAY, e)

        # Unexpected errors -> 500 Internal Server Error
        except Exception as e:
            logger.error(
                f"Unexpected error in {func.__name__}: {str(e)}", exc_info=True
            )
            body = ResponseFactory.error(message=ResponseMessages.UNEXPECTED_ERROR)
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=body.model_dump(mode="json"),
            )

    return wrapper
