from __future__ import annotations


class ReservationError(Exception):
    """Base class for failures raised by the reservation lifecycle."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(ReservationError):
    """Raise to map to HTTP 400 (business rule violated)."""


class NotFoundError(ReservationError):
    """Raise to map to HTTP 404."""
