"""Exceptions raised by the city graph and the traffic engine."""

from typing import List, Optional, Tuple


class CityGraphError(Exception):
    """Base exception for city graph operations."""
    pass


class CityNotFoundError(CityGraphError):
    """Raised when a city identifier was never registered in the graph."""

    def __init__(self, city_id: int):
        self.city_id = city_id
        super().__init__(f"City not found: {city_id}")


class SentinelCollisionError(CityGraphError):
    """Raised when a city uses the reserved no-parent identifier."""

    def __init__(self, city_id: int):
        self.city_id = city_id
        super().__init__(
            f"City id {city_id} is reserved as the no-parent marker"
        )


class InvalidCityIdError(CityGraphError):
    """Raised for identifiers that are not unsigned integers."""

    def __init__(self, city_id: object):
        self.city_id = city_id
        super().__init__(f"Invalid city id: {city_id!r} (expected unsigned integer)")


class NotATreeError(CityGraphError):
    """Raised when the road network contains a cycle and trees are enforced."""

    def __init__(self, cycle: Optional[List[Tuple[int, int]]] = None):
        self.cycle = cycle or []
        super().__init__(f"City graph is not a tree, cycle through roads: {self.cycle}")
