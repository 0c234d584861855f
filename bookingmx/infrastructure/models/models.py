from __future__ import annotations

from datetime import date

from sqlalchemy import Date, Enum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from bookingmx.core.entities.reservation import ReservationStatus
from bookingmx.infrastructure.database import Base


class ReservationModel(Base):
    __tablename__ = "reservations"
    # AUTOINCREMENT so SQLite never hands out an id twice
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    guest_name: Mapped[str] = mapped_column(String, nullable=False)
    hotel_name: Mapped[str] = mapped_column(String, nullable=False, index=True)
    check_in: Mapped[date] = mapped_column(Date, nullable=False)
    check_out: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[ReservationStatus] = mapped_column(Enum(ReservationStatus), nullable=False)
