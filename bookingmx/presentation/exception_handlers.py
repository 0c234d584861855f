from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bookingmx.core.exceptions import NotFoundError, ReservationError, ValidationError
from bookingmx.schemas.models import ErrorResponse

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "Unexpected error"


def error_body(message: str, status_code: int) -> dict:
    return ErrorResponse(
        timestamp=datetime.now(timezone.utc).isoformat(),
        status=status_code,
        message=message,
    ).model_dump()


def _error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=error_body(message, status_code))


async def reservation_error_handler(request: Request, exc: ReservationError) -> JSONResponse:
    if isinstance(exc, NotFoundError):
        return _error_response(exc.message, status.HTTP_404_NOT_FOUND)
    if isinstance(exc, ValidationError):
        return _error_response(exc.message, status.HTTP_400_BAD_REQUEST)
    logger.error("Unmapped reservation error: %s", exc.message)
    return _error_response(UNEXPECTED_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = []
    for error in exc.errors():
        # drop the leading "body"/"path"/"query" segment
        field = ".".join(str(part) for part in error["loc"][1:])
        problems.append(f"{field}: {error['msg']}" if field else error["msg"])
    message = "; ".join(problems) or "Invalid request"
    logger.info("Request validation failed: %s", message)
    return _error_response(message, status.HTTP_400_BAD_REQUEST)


async def general_500_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return _error_response(UNEXPECTED_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)


# Exception handler mapping
EXCEPTION_HANDLERS = {
    ReservationError: reservation_error_handler,
    RequestValidationError: validation_error_handler,
    Exception: general_500_exception_handler,  # Catch-all for unhandled exceptions
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
