from __future__ import annotations

from dataclasses import dataclass

from bookingmx.core.entities.city_graph import get_nearby_cities
from bookingmx.core.repositories.city_graph_repository import CityGraphRepository


@dataclass(frozen=True, slots=True)
class NearbyCityDTO:
    """
    Use-case return item for GET /api/cities/{city}/nearby
    """
    city: str
    distance: float


class GetNearbyCitiesUseCase:
    def __init__(self, *, city_graph_repo: CityGraphRepository) -> None:
        self._city_graph_repo = city_graph_repo

    def execute(self, *, city: str, max_distance_km: float) -> list[NearbyCityDTO]:
        graph = self._city_graph_repo.load()
        return [
            NearbyCityDTO(city=n.city, distance=n.distance)
            for n in get_nearby_cities(graph, city, max_distance_km)
        ]

    def list_cities(self) -> list[str]:
        return self._city_graph_repo.load().cities
