"""Graph management modules for the city network."""

from .city_graph import CityGraph
from .errors import (
    CityGraphError,
    CityNotFoundError,
    SentinelCollisionError,
    InvalidCityIdError,
    NotATreeError
)
from .graph_utils import (
    find_cycle_edges,
    is_tree_network,
    asymmetric_roads,
    unregistered_neighbours,
    export_graph_to_json,
    export_graph_to_graphml,
    export_graph_snapshot
)

__all__ = [
    'CityGraph',
    'CityGraphError',
    'CityNotFoundError',
    'SentinelCollisionError',
    'InvalidCityIdError',
    'NotATreeError',
    'find_cycle_edges',
    'is_tree_network',
    'asymmetric_roads',
    'unregistered_neighbours',
    'export_graph_to_json',
    'export_graph_to_graphml',
    'export_graph_snapshot'
]
