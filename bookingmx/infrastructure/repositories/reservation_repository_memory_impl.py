from __future__ import annotations

import threading

from bookingmx.core.entities.reservation import Reservation
from bookingmx.core.repositories.reservation_repository import ReservationRepository


class InMemoryReservationRepositoryImpl(ReservationRepository):
    """
    Process-lifetime reservation store: a dict keyed by id plus an id sequence,
    both guarded by one lock.

    The store owns its records. Reads hand out copies, so stored state only
    changes through `save`.
    """

    def __init__(self) -> None:
        self._records: dict[int, Reservation] = {}
        self._last_id = 0
        self._lock = threading.Lock()

    def find_all(self) -> list[Reservation]:
        with self._lock:
            return [r.copy() for r in self._records.values()]

    def find_by_id(self, reservation_id: int) -> Reservation | None:
        with self._lock:
            record = self._records.get(reservation_id)
            return record.copy() if record is not None else None

    def save(self, reservation: Reservation) -> Reservation:
        with self._lock:
            if reservation.id is None:
                self._last_id += 1
                reservation.id = self._last_id
            else:
                # ids given by the caller still advance the sequence so it never hands them out again
                self._last_id = max(self._last_id, reservation.id)
            self._records[reservation.id] = reservation.copy()
        return reservation
