"""
Common error handling utilities following Clean Code principles.

Translates domain and request errors into ``{"message", "code"}`` JSON
responses at the request boundary. Each function has a single
responsibility and meaningful names.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from models.error import ErrorResponse
from repository.base import RepositoryPoisonedError
from services.book_service import BookAlreadyExistsError, InvalidBookParamsError
from core.constants import (
    ERROR_INVALID_PARAMS,
    ERROR_INVALID_REQUEST_BODY,
    ERROR_BOOK_ALREADY_EXISTS,
    ERROR_INTERNAL_SERVER,
    HTTP_422_BOOK_CONFLICT,
)

logger = logging.getLogger(__name__)


def create_error_response(message: str, status_code: int) -> JSONResponse:
    """
    Create a JSON error response with the standard error shape.

    Args:
        message: Human readable message
        status_code: HTTP status code, repeated as a string in the body

    Returns:
        JSONResponse with the given status code
    """
    body = ErrorResponse.for_status(message, status_code)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def handle_invalid_params(request: Request, error: InvalidBookParamsError) -> JSONResponse:
    return create_error_response(ERROR_INVALID_PARAMS, status.HTTP_400_BAD_REQUEST)


async def handle_request_validation(request: Request, error: RequestValidationError) -> JSONResponse:
    """Undecodable bodies are a client error, not a title conflict."""
    logger.debug(f"Rejected undecodable request body on {request.url.path}: {error.errors()}")
    return create_error_response(ERROR_INVALID_REQUEST_BODY, status.HTTP_400_BAD_REQUEST)


async def handle_http_exception(request: Request, error: StarletteHTTPException) -> JSONResponse:
    """Routing errors such as unknown paths and wrong methods."""
    response = create_error_response(str(error.detail), error.status_code)
    if error.headers:
        response.headers.update(error.headers)
    return response


async def handle_book_already_exists(request: Request, error: BookAlreadyExistsError) -> JSONResponse:
    return create_error_response(
        ERROR_BOOK_ALREADY_EXISTS, HTTP_422_BOOK_CONFLICT
    )


async def handle_repository_poisoned(request: Request, error: RepositoryPoisonedError) -> JSONResponse:
    logger.error(f"Refusing {request.method} {request.url.path}: {error}")
    return create_error_response(
        ERROR_INTERNAL_SERVER, status.HTTP_500_INTERNAL_SERVER_ERROR
    )


async def handle_unexpected_error(request: Request, error: Exception) -> JSONResponse:
    """Log the traceback but keep internal details out of the response."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return create_error_response(
        ERROR_INTERNAL_SERVER, status.HTTP_500_INTERNAL_SERVER_ERROR
    )


def register_exception_handlers(application: FastAPI) -> None:
    """Register all error translators with the application."""
    application.add_exception_handler(InvalidBookParamsError, handle_invalid_params)
    application.add_exception_handler(RequestValidationError, handle_request_validation)
    application.add_exception_handler(StarletteHTTPException, handle_http_exception)
    application.add_exception_handler(BookAlreadyExistsError, handle_book_already_exists)
    application.add_exception_handler(RepositoryPoisonedError, handle_repository_poisoned)
    application.add_exception_handler(Exception, handle_unexpected_error)
