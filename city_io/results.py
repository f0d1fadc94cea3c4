"""Rendering of traffic results."""

from typing import Dict, Iterable

from traffic_engine.batch import CityTraffic


def serialize_results(results: Iterable[CityTraffic]) -> str:
    """Render results as ``city:traffic`` pairs joined by commas."""
    return ",".join(f"{entry.city}:{entry.traffic}" for entry in results)


def results_to_dict(results: Iterable[CityTraffic]) -> Dict[str, int]:
    """JSON-friendly mapping of city id (as string) to traffic, in result order."""
    return {str(entry.city): entry.traffic for entry in results}
