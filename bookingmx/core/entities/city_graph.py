from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Connection:
    to: str
    distance: float


@dataclass(frozen=True, slots=True)
class NearbyCity:
    city: str
    distance: float


class Graph:
    """
    Undirected weighted graph of cities, distances in kilometres.
    """

    def __init__(self) -> None:
        self._adj: dict[str, list[Connection]] = {}

    def __contains__(self, city: object) -> bool:
        return city in self._adj

    @property
    def cities(self) -> list[str]:
        return list(self._adj)

    def add_city(self, name: str) -> None:
        if not isinstance(name, str) or not name:
            raise ValueError("Invalid city name")
        self._adj.setdefault(name, [])

    def add_edge(self, from_city: str, to_city: str, distance_km: float) -> None:
        if from_city not in self._adj or to_city not in self._adj:
            raise ValueError("Unknown city")
        if not _is_valid_distance(distance_km):
            raise ValueError("Invalid distance")
        self._adj[from_city].append(Connection(to=to_city, distance=distance_km))
        self._adj[to_city].append(Connection(to=from_city, distance=distance_km))

    def neighbors(self, city: str) -> list[Connection]:
        if city not in self._adj:
            raise ValueError("Unknown city")
        return list(self._adj[city])


def _is_valid_distance(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value >= 0


def _has_duplicates(items: list[Any]) -> bool:
    seen: set[Any] = set()
    seen_ids: set[int] = set()
    for item in items:
        try:
            if item in seen:
                return True
            seen.add(item)
        except TypeError:
            # unhashable entries only duplicate themselves
            if id(item) in seen_ids:
                return True
            seen_ids.add(id(item))
    return False


def validate_graph_data(cities: Any, edges: Any) -> tuple[bool, str | None]:
    """
    Check a raw dataset before building a graph from it.

    Returns (True, None) when valid, otherwise (False, reason).
    """
    if not isinstance(cities, list) or not isinstance(edges, list):
        return False, "cities/edges must be arrays"
    if _has_duplicates(cities):
        return False, "duplicate cities"
    if any(not isinstance(city, str) or not city.strip() for city in cities):
        return False, "invalid city entry"
    city_set = set(cities)
    for edge in edges:
        edge = edge if isinstance(edge, dict) else {}
        endpoints = (edge.get("from"), edge.get("to"))
        if not all(isinstance(city, str) and city in city_set for city in endpoints):
            return False, "edge references unknown city"
        if not _is_valid_distance(edge.get("distance")):
            return False, "invalid distance"
    return True, None


def build_graph(cities: list[str], edges: list[dict[str, Any]]) -> Graph:
    graph = Graph()
    for city in cities:
        graph.add_city(city)
    for edge in edges:
        graph.add_edge(edge["from"], edge["to"], edge["distance"])
    return graph


def get_nearby_cities(graph: Graph, destination: str, max_distance_km: float = 250) -> list[NearbyCity]:
    """Direct neighbors of `destination` within `max_distance_km`, closest first."""
    if not isinstance(graph, Graph):
        raise TypeError("graph must be Graph")
    if not isinstance(destination, str) or destination not in graph:
        return []

    nearby = [n for n in graph.neighbors(destination) if n.distance <= max_distance_km]
    nearby.sort(key=lambda n: n.distance)
    return [NearbyCity(city=n.to, distance=n.distance) for n in nearby]
