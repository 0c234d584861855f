from __future__ import annotations

from abc import ABC, abstractmethod

from bookingmx.core.entities.reservation import Reservation


class ReservationRepository(ABC):
    @abstractmethod
    def find_all(self) -> list[Reservation]:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, reservation_id: int) -> Reservation | None:
        raise NotImplementedError

    @abstractmethod
    def save(self, reservation: Reservation) -> Reservation:
        """
        Insert an id-less reservation under the next sequence id, or replace the
        stored reservation with the same id. Returns the stored reservation.
        """
        raise NotImplementedError
