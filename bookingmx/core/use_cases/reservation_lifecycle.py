from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from bookingmx.core.entities.reservation import Reservation
from bookingmx.core.exceptions import NotFoundError, ValidationError
from bookingmx.core.repositories.reservation_repository import ReservationRepository

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Reservation not found"
CANCELED_MESSAGE = "Cannot modify a canceled reservation"


@dataclass(frozen=True, slots=True)
class ReservationRequest:
    """
    Use-case input for create and update.

    Dates may be missing here: the lifecycle rejects them itself.
    """
    guest_name: str
    hotel_name: str
    check_in: date | None
    check_out: date | None


def validate_dates(check_in: date | None, check_out: date | None, *, today: date) -> None:
    """
    Apply the reservation date rules in order; the first failing rule is reported.
    """
    if check_in is None or check_out is None:
        raise ValidationError("Dates cannot be null")
    if not check_out > check_in:
        raise ValidationError("Check-out must be after check-in")
    if not check_in > today:
        raise ValidationError("Check-in must be in the future")


class ReservationLifecycleManager:
    """
    Owns the reservation business rules and is the only caller of the store.

    State machine: ACTIVE -> CANCELED. Updates are allowed only while ACTIVE;
    cancel is terminal and idempotent. "Today" is read from the clock on every
    create and update.
    """

    def __init__(
            self,
            *,
            reservation_repo: ReservationRepository,
            today: Callable[[], date] = date.today,
    ) -> None:
        self._reservation_repo = reservation_repo
        self._today = today

    def list(self) -> list[Reservation]:
        return self._reservation_repo.find_all()

    def create(self, request: ReservationRequest) -> Reservation:
        self._validate(request)

        reservation = self._reservation_repo.save(
            Reservation(
                guest_name=request.guest_name,
                hotel_name=request.hotel_name,
                check_in=request.check_in,
                check_out=request.check_out,
            )
        )
        logger.info("Reservation created", extra={"extra_fields": {"reservation_id": reservation.id}})
        return reservation

    def find_by_id(self, reservation_id: int) -> Reservation:
        reservation = self._reservation_repo.find_by_id(reservation_id)
        if reservation is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return reservation

    def update(self, reservation_id: int, request: ReservationRequest) -> Reservation:
        existing = self.find_by_id(reservation_id)
        if not existing.is_active:
            logger.info(CANCELED_MESSAGE, extra={"extra_fields": {"reservation_id": reservation_id}})
            raise ValidationError(CANCELED_MESSAGE)

        self._validate(request)

        existing.reschedule(
            guest_name=request.guest_name,
            hotel_name=request.hotel_name,
            check_in=request.check_in,
            check_out=request.check_out,
        )

        reservation = self._reservation_repo.save(existing)
        logger.info("Reservation updated", extra={"extra_fields": {"reservation_id": reservation.id}})
        return reservation

    def cancel(self, reservation_id: int) -> Reservation:
        existing = self.find_by_id(reservation_id)
        existing.mark_canceled()

        reservation = self._reservation_repo.save(existing)
        logger.info("Reservation canceled", extra={"extra_fields": {"reservation_id": reservation.id}})
        return reservation

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _validate(self, request: ReservationRequest) -> None:
        try:
            validate_dates(request.check_in, request.check_out, today=self._today())
        except ValidationError as e:
            logger.info("Reservation rejected: %s", e.message)
            raise
