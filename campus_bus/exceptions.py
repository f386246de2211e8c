"""
Error taxonomy and FastAPI exception handlers.

Every domain failure is a ``BusBookingError`` subclass carrying the HTTP
status it maps to. Handlers render all failures in the same envelope the
successful responses use: ``{"success": false, "message": ...}``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class BusBookingError(Exception):
    """Base exception for booking system errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


# 4xx

class InvalidInputError(BusBookingError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input"


class InvalidCredentialsError(BusBookingError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid credentials"


class NotFoundError(BusBookingError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class StudentNotFoundError(NotFoundError):
    default_message = "Student not found"


class BusRouteNotFoundError(NotFoundError):
    default_message = "Bus route not found"


class BookingNotFoundError(NotFoundError):
    default_message = "Booking not found"


class ConflictError(BusBookingError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict with the current state of the resource"


class DuplicateBusNumberError(ConflictError):
    default_message = "Bus number already exists"


class NoSeatsAvailableError(ConflictError):
    default_message = "No seats available on this bus"


class DuplicateBookingError(ConflictError):
    default_message = "You already have a booking for this bus on this date"


class BookingStateError(ConflictError):
    """Invalid booking status transition."""
    default_message = "Invalid booking status transition"


# 5xx

class SystemOfflineError(BusBookingError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_message = "System is currently offline. Please try again later."


class InternalError(BusBookingError):
    pass


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
    )


def _first_validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid input"

    error = errors[0]
    # Custom validators raise ValueError; report their text verbatim
    ctx_error = (error.get("ctx") or {}).get("error")
    if isinstance(ctx_error, ValueError) and str(ctx_error):
        return str(ctx_error)

    location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    message = error.get("msg", "Invalid input")
    return f"{location}: {message}" if location else message


async def bus_booking_error_handler(request: Request, exc: BusBookingError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
    return _error_response(exc.status_code, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error_response(status.HTTP_400_BAD_REQUEST, _first_validation_message(exc))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, InternalError.default_message)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error envelope handlers to an application."""
    app.add_exception_handler(BusBookingError, bus_booking_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
