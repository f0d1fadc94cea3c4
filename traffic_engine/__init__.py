"""Maximum traffic computation modules."""

from .path_cache import PathTrafficCache, NO_PARENT
from .rerooting import RerootingEngine, ResolveStats
from .batch import TrafficBatch, CityTraffic

__all__ = [
    'PathTrafficCache',
    'NO_PARENT',
    'RerootingEngine',
    'ResolveStats',
    'TrafficBatch',
    'CityTraffic'
]
