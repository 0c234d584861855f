from __future__ import annotations

from functools import lru_cache

from bookingmx.core.repositories.city_graph_repository import CityGraphRepository
from bookingmx.core.use_cases.get_nearby_cities import GetNearbyCitiesUseCase
from bookingmx.infrastructure.repositories.city_graph_repository_yaml_impl import YamlCityGraphRepositoryImpl
from bookingmx.schemas.models import NearbyCity


@lru_cache(maxsize=1)
def get_city_graph_repository() -> CityGraphRepository:
    from bookingmx.infrastructure.config import settings
    return YamlCityGraphRepositoryImpl(file_path=settings.cities_path)


def list_cities_service(repo: CityGraphRepository) -> list[str]:
    return GetNearbyCitiesUseCase(city_graph_repo=repo).list_cities()


def get_nearby_cities_service(city: str, max_distance_km: float, repo: CityGraphRepository) -> list[NearbyCity]:
    use_case = GetNearbyCitiesUseCase(city_graph_repo=repo)

    dtos = use_case.execute(city=city, max_distance_km=max_distance_km)

    return [NearbyCity(city=dto.city, distance=dto.distance) for dto in dtos]
