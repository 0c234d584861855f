from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from bookingmx.core.repositories.city_graph_repository import CityGraphRepository
from bookingmx.core.repositories.reservation_repository import ReservationRepository
from bookingmx.infrastructure.config import settings
from bookingmx.schemas.models import NearbyCity, ReservationRequest, ReservationResponse
from bookingmx.services.city_service import (
    get_city_graph_repository,
    get_nearby_cities_service,
    list_cities_service,
)
from bookingmx.services.reservation_service import (
    cancel_reservation_service,
    create_reservation_service,
    get_reservation_repository,
    get_reservation_service,
    list_reservations_service,
    update_reservation_service,
)

router = APIRouter(prefix="/api")


def get_reservation_repo() -> ReservationRepository:
    return get_reservation_repository()


def get_city_graph_repo() -> CityGraphRepository:
    return get_city_graph_repository()


@router.get("/reservations", response_model=list[ReservationResponse])
def get_reservations(repo: ReservationRepository = Depends(get_reservation_repo)) -> list[ReservationResponse]:
    """
    List every reservation, canceled ones included
    """
    return list_reservations_service(repo)


@router.get("/reservations/{reservation_id}", response_model=ReservationResponse)
def get_reservations_reservation_id(
    reservation_id: int,
    repo: ReservationRepository = Depends(get_reservation_repo),
) -> ReservationResponse:
    """
    Get one reservation

    Returns:
      - 200 with the reservation
      - 404 if no reservation has this id
    """
    return get_reservation_service(reservation_id, repo)


@router.post("/reservations", response_model=ReservationResponse)
def post_reservations(
    body: ReservationRequest,
    repo: ReservationRepository = Depends(get_reservation_repo),
) -> ReservationResponse:
    """
    Create a reservation

    Returns:
      - 200 with the created reservation (status ACTIVE)
      - 400 on invalid payload or dates
    """
    return create_reservation_service(body, repo)


@router.put("/reservations/{reservation_id}", response_model=ReservationResponse)
def put_reservations_reservation_id(
    reservation_id: int,
    body: ReservationRequest,
    repo: ReservationRepository = Depends(get_reservation_repo),
) -> ReservationResponse:
    """
    Replace guest, hotel and dates of an active reservation

    Returns:
      - 200 with the updated reservation
      - 400 on invalid payload or dates, or if the reservation is canceled
      - 404 if no reservation has this id
    """
    return update_reservation_service(reservation_id, body, repo)


@router.delete("/reservations/{reservation_id}", response_model=ReservationResponse)
def delete_reservations_reservation_id(
    reservation_id: int,
    repo: ReservationRepository = Depends(get_reservation_repo),
) -> ReservationResponse:
    """
    Cancel a reservation (soft delete, idempotent)
    """
    return cancel_reservation_service(reservation_id, repo)


@router.get("/cities", response_model=list[str])
def get_cities(repo: CityGraphRepository = Depends(get_city_graph_repo)) -> list[str]:
    return list_cities_service(repo)


@router.get("/cities/{city}/nearby", response_model=list[NearbyCity])
def get_cities_city_nearby(
    city: str,
    max_distance: float | None = Query(default=None, ge=0),
    repo: CityGraphRepository = Depends(get_city_graph_repo),
) -> list[NearbyCity]:
    """
    Direct neighbors of a city within `max_distance` km, closest first.
    Unknown cities yield an empty list.
    """
    if max_distance is None:
        max_distance = settings.nearby_max_distance_km
    return get_nearby_cities_service(city, max_distance, repo)
