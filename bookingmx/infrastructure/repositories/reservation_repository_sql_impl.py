from __future__ import annotations

import threading

from sqlalchemy import select
from sqlalchemy.orm import Session, sessionmaker

from bookingmx.core.entities.reservation import Reservation, ReservationStatus
from bookingmx.core.repositories.reservation_repository import ReservationRepository
from bookingmx.infrastructure.models.models import ReservationModel


class SqlReservationRepositoryImpl(ReservationRepository):
    """
    Reservation store backed by a SQLAlchemy `reservations` table; one session per call.
    Ids come from the table's autoincrement primary key.

    Sessions are opened one at a time: in-memory SQLite shares a single connection
    between all threads.
    """

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory
        self._lock = threading.Lock()

    def find_all(self) -> list[Reservation]:
        with self._lock, self._session_factory() as db:
            rows = db.scalars(select(ReservationModel).order_by(ReservationModel.id)).all()
            return [self._to_entity(row) for row in rows]

    def find_by_id(self, reservation_id: int) -> Reservation | None:
        with self._lock, self._session_factory() as db:
            row = db.get(ReservationModel, reservation_id)
            if row is None:
                return None
            return self._to_entity(row)

    def save(self, reservation: Reservation) -> Reservation:
        with self._lock, self._session_factory() as db:
            row = self._get_or_new_row(db, reservation.id)

            row.guest_name = reservation.guest_name
            row.hotel_name = reservation.hotel_name
            row.check_in = reservation.check_in
            row.check_out = reservation.check_out
            row.status = reservation.status

            db.add(row)
            db.commit()
            reservation.id = row.id
        return reservation

    @staticmethod
    def _get_or_new_row(db: Session, reservation_id: int | None) -> ReservationModel:
        if reservation_id is None:
            return ReservationModel()
        row = db.get(ReservationModel, reservation_id)
        if row is None:
            row = ReservationModel(id=reservation_id)
        return row

    @staticmethod
    def _to_entity(row: ReservationModel) -> Reservation:
        return Reservation(
            id=row.id,
            guest_name=row.guest_name,
            hotel_name=row.hotel_name,
            check_in=row.check_in,
            check_out=row.check_out,
            status=ReservationStatus(row.status) if not isinstance(row.status, ReservationStatus) else row.status,
        )
