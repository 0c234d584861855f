from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Status(Enum):
    ACTIVE = 'ACTIVE'
    CANCELED = 'CANCELED'


class ReservationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    guest_name: str = Field(alias='guestName')
    hotel_name: str = Field(alias='hotelName')
    # null dates are let through here; the reservation rules reject them
    check_in: Optional[date] = Field(default=None, alias='checkIn')
    check_out: Optional[date] = Field(default=None, alias='checkOut')

    @field_validator('guest_name', 'hotel_name')
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError('must not be blank')
        return value

    @field_validator('check_in', 'check_out', mode='before')
    @classmethod
    def _iso_date_only(cls, value: Any) -> Any:
        # numbers would otherwise be read as unix timestamps
        if value is not None and not isinstance(value, (str, date)):
            raise ValueError('must be an ISO date (YYYY-MM-DD)')
        return value


class ReservationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    guest_name: str = Field(alias='guestName')
    hotel_name: str = Field(alias='hotelName')
    check_in: date = Field(alias='checkIn')
    check_out: date = Field(alias='checkOut')
    status: Status


class ErrorResponse(BaseModel):
    timestamp: str
    status: int
    message: str


class NearbyCity(BaseModel):
    city: str
    distance: float
