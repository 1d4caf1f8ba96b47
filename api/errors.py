"""
Gestionnaires d'exceptions : toute erreur devient {"error": "<message>"}
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from domain.exceptions import (
    AppError, DuplicateResourceError, InternalError, NotFoundError, StoreError, ValidationError
)

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _status_for(exc: AppError) -> int:
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, DuplicateResourceError):
        return status.HTTP_409_CONFLICT
    if isinstance(exc, ValidationError):
        return status.HTTP_400_BAD_REQUEST
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "Invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "Validation error: " + "; ".join(parts)


async def app_error_handler(request: Request, exc: AppError):
    status_code = _status_for(exc)
    if isinstance(exc, StoreError):
        # Le détail reste dans les logs
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return error_response(status_code, "Database error")
    if isinstance(exc, InternalError):
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return error_response(status_code, "Internal server error")
    logger.info(f"{request.method} {request.url.path} -> {status_code}: {exc.message}")
    return error_response(status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    message = _format_validation_errors(exc)
    logger.info(f"{request.method} {request.url.path} -> 400: {message}")
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail))


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    """Enregistre les gestionnaires sur l'application"""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
