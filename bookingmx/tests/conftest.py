from __future__ import annotations

from collections.abc import Iterator
from datetime import date, timedelta

import pytest
from starlette.testclient import TestClient

import bookingmx.presentation.routers as routers
from bookingmx.core.use_cases.reservation_lifecycle import ReservationLifecycleManager, ReservationRequest
from bookingmx.infrastructure.repositories.reservation_repository_memory_impl import InMemoryReservationRepositoryImpl
from bookingmx.main import app

TODAY = date(2030, 1, 10)


def make_request(
    *,
    guest_name: str = "John Doe",
    hotel_name: str = "Grand Sunset Resort",
    check_in: date | None = TODAY + timedelta(days=1),
    check_out: date | None = TODAY + timedelta(days=3),
) -> ReservationRequest:
    return ReservationRequest(
        guest_name=guest_name,
        hotel_name=hotel_name,
        check_in=check_in,
        check_out=check_out,
    )


@pytest.fixture()
def repo() -> InMemoryReservationRepositoryImpl:
    return InMemoryReservationRepositoryImpl()


@pytest.fixture()
def manager(repo: InMemoryReservationRepositoryImpl) -> ReservationLifecycleManager:
    return ReservationLifecycleManager(reservation_repo=repo, today=lambda: TODAY)


@pytest.fixture()
def client(repo: InMemoryReservationRepositoryImpl) -> Iterator[TestClient]:
    """
    The real app, with the process-wide store swapped for a fresh one per test.
    """
    app.dependency_overrides[routers.get_reservation_repo] = lambda: repo
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
