from __future__ import annotations

from abc import ABC, abstractmethod

from bookingmx.core.entities.city_graph import Graph


class CityGraphRepository(ABC):
    @abstractmethod
    def load(self) -> Graph:
        """Raise ValueError if the underlying dataset is invalid."""
        raise NotImplementedError
