"""City road network data structure."""

import logging
from typing import Dict, Iterator, List, Tuple

from .errors import CityNotFoundError, InvalidCityIdError, SentinelCollisionError

logger = logging.getLogger(__name__)

# Identifier the legacy input format used as "no parent"
LEGACY_SENTINEL_ID = 0


class CityGraph:
    """
    Adjacency model of the city network.

    Each city maps to the ordered list of its neighbouring cities, in the
    order roads were added. Roads are stored exactly as given: adding
    a road from a to b does not add the road from b to a.
    """

    def __init__(self, reserve_zero_id: bool = False):
        """
        Initialize empty city graph.

        Args:
            reserve_zero_id: Reject city 0, which legacy inputs reserve
                as the no-parent marker
        """
        self.reserve_zero_id = reserve_zero_id
        self.cities: Dict[int, List[int]] = {}
        logger.debug("City graph initialized")

    def add_city(self, city_id: int) -> None:
        """Register a city with an empty neighbour list. Idempotent."""
        self._check_id(city_id)
        if city_id not in self.cities:
            self.cities[city_id] = []
            logger.debug(f"Added city: {city_id}")

    def add_road(self, city_id: int, neighbour_id: int) -> None:
        """Append neighbour_id to the neighbour list of city_id."""
        self._check_id(neighbour_id)
        self.add_city(city_id)
        self.cities[city_id].append(neighbour_id)
        logger.debug(f"Added road: {city_id} -> {neighbour_id}")

    def has_city(self, city_id: int) -> bool:
        """Check if city exists in graph."""
        return city_id in self.cities

    def neighbours_of(self, city_id: int) -> List[int]:
        """Get the ordered neighbour list of a city."""
        try:
            return self.cities[city_id]
        except KeyError:
            raise CityNotFoundError(city_id) from None

    def city_ids(self) -> List[int]:
        """Get all city ids in registration order."""
        return list(self.cities)

    def roads(self) -> Iterator[Tuple[int, int]]:
        """Iterate over every stored (city, neighbour) pair."""
        for city_id, neighbours in self.cities.items():
            for neighbour_id in neighbours:
                yield city_id, neighbour_id

    def clear(self) -> None:
        """Remove all cities and roads."""
        self.cities.clear()
        logger.debug("City graph cleared")

    def _check_id(self, city_id: int) -> None:
        if isinstance(city_id, bool) or not isinstance(city_id, int) or city_id < 0:
            raise InvalidCityIdError(city_id)
        if self.reserve_zero_id and city_id == LEGACY_SENTINEL_ID:
            raise SentinelCollisionError(city_id)

    def __len__(self) -> int:
        return len(self.cities)

    def __contains__(self, city_id: object) -> bool:
        return city_id in self.cities

    def __repr__(self) -> str:
        return f"CityGraph(cities={len(self.cities)}, roads={sum(len(n) for n in self.cities.values())})"
