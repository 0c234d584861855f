from __future__ import annotations

from functools import lru_cache

from bookingmx.core.entities.reservation import Reservation
from bookingmx.core.repositories.reservation_repository import ReservationRepository
from bookingmx.core.use_cases.reservation_lifecycle import ReservationLifecycleManager
from bookingmx.core.use_cases.reservation_lifecycle import ReservationRequest as CoreReservationRequest
from bookingmx.infrastructure.database import create_session_factory
from bookingmx.infrastructure.repositories.reservation_repository_memory_impl import InMemoryReservationRepositoryImpl
from bookingmx.infrastructure.repositories.reservation_repository_sql_impl import SqlReservationRepositoryImpl
from bookingmx.schemas.models import ReservationRequest, ReservationResponse, Status


@lru_cache(maxsize=1)
def get_reservation_repository() -> ReservationRepository:
    """
    The process-wide reservation store, chosen by `settings.store_backend`.
    """
    from bookingmx.infrastructure.config import settings

    if settings.store_backend == "sql":
        return SqlReservationRepositoryImpl(create_session_factory(settings.database_url))
    return InMemoryReservationRepositoryImpl()


def _to_core_request(body: ReservationRequest) -> CoreReservationRequest:
    """
    Translate API schema ReservationRequest -> core ReservationRequest.
    """
    return CoreReservationRequest(
        guest_name=body.guest_name,
        hotel_name=body.hotel_name,
        check_in=body.check_in,
        check_out=body.check_out,
    )


def _to_response(reservation: Reservation) -> ReservationResponse:
    return ReservationResponse(
        id=reservation.id,
        guest_name=reservation.guest_name,
        hotel_name=reservation.hotel_name,
        check_in=reservation.check_in,
        check_out=reservation.check_out,
        status=Status(reservation.status.value),
    )


def list_reservations_service(repo: ReservationRepository) -> list[ReservationResponse]:
    manager = ReservationLifecycleManager(reservation_repo=repo)
    return [_to_response(r) for r in manager.list()]


def get_reservation_service(reservation_id: int, repo: ReservationRepository) -> ReservationResponse:
    manager = ReservationLifecycleManager(reservation_repo=repo)
    return _to_response(manager.find_by_id(reservation_id))


def create_reservation_service(body: ReservationRequest, repo: ReservationRepository) -> ReservationResponse:
    manager = ReservationLifecycleManager(reservation_repo=repo)
    return _to_response(manager.create(_to_core_request(body)))


def update_reservation_service(
    reservation_id: int,
    body: ReservationRequest,
    repo: ReservationRepository,
) -> ReservationResponse:
    manager = ReservationLifecycleManager(reservation_repo=repo)
    return _to_response(manager.update(reservation_id, _to_core_request(body)))


def cancel_reservation_service(reservation_id: int, repo: ReservationRepository) -> ReservationResponse:
    manager = ReservationLifecycleManager(reservation_repo=repo)
    return _to_response(manager.cancel(reservation_id))
