# Standard library imports
import logging
from typing import Dict, Optional, Type

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from ...domain.exceptions import (
    AuthenticationError,
    AuthorizationError,
    BlogListError,
    DuplicateKeyError,
    NotFoundError,
    TokenError,
    ValidationError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: Dict[Type[BlogListError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    DuplicateKeyError: status.HTTP_400_BAD_REQUEST,
    AuthenticationError: status.HTTP_401_UNAUTHORIZED,
    AuthorizationError: status.HTTP_401_UNAUTHORIZED,
    NotFoundError: status.HTTP_404_NOT_FOUND,
}

INTERNAL_ERROR_MESSAGE = "internal server error"


def error_response(status_code: int, message: str, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def status_for(exception: BlogListError) -> int:
    for error_type in type(exception).__mro__:
        if error_type in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[error_type]
    return status.HTTP_400_BAD_REQUEST


async def handle_domain_error(request: Request, exception: BlogListError) -> JSONResponse:
    status_code = status_for(exception)
    message = exception.message

    # Ownership failures look exactly like a bad token from outside
    if isinstance(exception, AuthorizationError):
        message = TokenError.INVALID

    headers = None
    if isinstance(exception, TokenError):
        headers = {"WWW-Authenticate": "Bearer"}

    return error_response(status_code, message, headers)


async def handle_request_validation_error(request: Request, exception: RequestValidationError) -> JSONResponse:
    errors = exception.errors()
    if not errors:
        return error_response(status.HTTP_400_BAD_REQUEST, "invalid request")

    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "invalid value")
    if location:
        message = f"`{location}`: {message}"
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def handle_http_exception(request: Request, exception: StarletteHTTPException) -> JSONResponse:
    return error_response(exception.status_code, str(exception.detail), getattr(exception, "headers", None))


async def handle_unexpected_error(request: Request, exception: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}: {exception}",
        exc_info=exception,
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(application: FastAPI) -> None:
    """Render every error as ``{"error": "<message>"}``"""
    application.add_exception_handler(BlogListError, handle_domain_error)
    application.add_exception_handler(RequestValidationError, handle_request_validation_error)
    application.add_exception_handler(StarletteHTTPException, handle_http_exception)
    application.add_exception_handler(Exception, handle_unexpected_error)
