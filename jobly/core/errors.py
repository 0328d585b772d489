"""
Application Errors - Error kinds and their HTTP translation.

Models and helpers raise these; the handlers registered in
register_exception_handlers() turn them into JSON responses.

    JoblyError          500
    ValidationError     400
    UnauthorizedError   401
    NotFoundError       404
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from jobly.core.logging_config import get_logger

logger = get_logger(__name__)


class JoblyError(Exception):
    """Base error carrying a client-facing message and an HTTP status."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, status_code={self.status_code})"


class ValidationError(JoblyError):
    """Client sent bad input. Retrying with the same input will not help."""

    status_code = status.HTTP_400_BAD_REQUEST


class UnauthorizedError(JoblyError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class NotFoundError(JoblyError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "Not Found"):
        super().__init__(message)


async def jobly_error_handler(request: Request, exc: JoblyError) -> JSONResponse:
    """Convert a JoblyError into {"detail": message} with its status code."""
    logger.warning(
        f"{exc.__class__.__name__}: {exc.message} - "
        f"Request: {request.method} {request.url.path}"
    )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Schema violations (missing fields, wrong types, extra fields) are
    client errors, so they come back as 400 rather than FastAPI's 422.
    """
    errors = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"] if loc not in ("body", "query"))
        errors.append(f"{field}: {error['msg']}" if field else error["msg"])

    logger.info(f"Request validation failed: {request.method} {request.url.path} - {errors}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": errors})


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """A unique or foreign key constraint rejected the write; the client sent a conflicting value."""
    logger.warning(f"IntegrityError: {exc.orig} - Request: {request.method} {request.url.path}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": "Duplicate or conflicting value"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(JoblyError, jobly_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
