from __future__ import annotations

from pathlib import Path

import yaml

from bookingmx.core.entities.city_graph import Graph, build_graph, validate_graph_data
from bookingmx.core.repositories.city_graph_repository import CityGraphRepository


class YamlCityGraphRepositoryImpl(CityGraphRepository):
    """
    City graph read from a YAML document with `cities` and `edges` keys.

    The file is parsed and validated once; later calls return the same graph.
    """

    def __init__(self, *, file_path: str | Path) -> None:
        self._path = Path(file_path)
        self._graph: Graph | None = None

    def load(self) -> Graph:
        if self._graph is None:
            with self._path.open(encoding="utf-8") as f:
                doc = yaml.safe_load(f) or {}
            if not isinstance(doc, dict):
                raise ValueError(f"Invalid city dataset {self._path.name}: expected a mapping")

            cities = doc.get("cities")
            edges = doc.get("edges")
            ok, reason = validate_graph_data(cities, edges)
            if not ok:
                raise ValueError(f"Invalid city dataset {self._path.name}: {reason}")

            self._graph = build_graph(cities, edges)
        return self._graph
