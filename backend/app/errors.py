"""API error types and the exception handlers that render them.

Every failure leaves the API in one of three shapes:

    400 {"errors": [...]}              request failed validation
    4xx {"message": "..."}             a domain rule rejected the request
    500 {"message": "...", "errorId"}  anything else; details stay in the log
"""
import logging
import uuid

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """A domain rejection with a status code and a single client-facing message."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(message)


class RequestValidationFailed(Exception):
    """Validator output: one human-readable string per problem."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("; ".join(errors))


def internal_error(message: str, exc: Exception) -> JSONResponse:
    """Log an unexpected failure and return an opaque 500 response."""
    error_id = uuid.uuid4().hex
    logger.error("Unhandled error %s: %s", error_id, message, exc_info=exc)
    return JSONResponse(status_code=500, content={"message": message, "errorId": error_id})


async def _api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def _validation_failed_handler(request: Request, exc: RequestValidationFailed) -> JSONResponse:
    return JSONResponse(status_code=400, content={"errors": exc.errors})


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        errors.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    return JSONResponse(status_code=400, content={"errors": errors})


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    return internal_error("Internal server error.", exc)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, _api_error_handler)
    app.add_exception_handler(RequestValidationFailed, _validation_failed_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
