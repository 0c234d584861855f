from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from enum import Enum


class ReservationStatus(str, Enum):
    ACTIVE = "ACTIVE"
    CANCELED = "CANCELED"


@dataclass(slots=True, eq=False)
class Reservation:
    """
    Hotel reservation. Identity is the store-assigned id: two instances with the
    same id are equal whatever their other fields hold.
    """
    guest_name: str
    hotel_name: str
    check_in: date
    check_out: date
    status: ReservationStatus = ReservationStatus.ACTIVE
    id: int | None = None

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Reservation):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def is_active(self) -> bool:
        return self.status is ReservationStatus.ACTIVE

    def reschedule(self, *, guest_name: str, hotel_name: str, check_in: date, check_out: date) -> None:
        if not self.is_active:
            raise ValueError("Cannot modify a canceled reservation")
        self.guest_name = guest_name
        self.hotel_name = hotel_name
        self.check_in = check_in
        self.check_out = check_out

    def mark_canceled(self) -> None:
        self.status = ReservationStatus.CANCELED

    def copy(self) -> Reservation:
        return replace(self)
