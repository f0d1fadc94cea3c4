"""Graph analysis and export utilities for the city network."""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import networkx as nx

from .city_graph import CityGraph

logger = logging.getLogger(__name__)


def _to_networkx(graph: CityGraph, directed: bool = False) -> nx.Graph:
    """
    Convert a CityGraph to a networkx graph.

    Self-loops are dropped. In the undirected form the roads a->b and b->a
    collapse into a single edge.
    """
    nx_graph = nx.DiGraph() if directed else nx.Graph()
    nx_graph.add_nodes_from(graph.city_ids())
    for city_id, neighbour_id in graph.roads():
        if city_id != neighbour_id:
            nx_graph.add_edge(city_id, neighbour_id)
    return nx_graph


def find_cycle_edges(graph: CityGraph) -> Optional[List[Tuple[int, int]]]:
    """
    Find a cycle in the undirected city network.

    Returns:
        List of (city, neighbour) edges forming a cycle, or None for a forest
    """
    nx_graph = _to_networkx(graph)
    try:
        cycle = nx.find_cycle(nx_graph)
    except nx.NetworkXNoCycle:
        return None
    return [(u, v) for u, v in cycle]


def is_tree_network(graph: CityGraph) -> bool:
    """Check that the network has no cycles (isolated cities are allowed)."""
    return find_cycle_edges(graph) is None


def asymmetric_roads(graph: CityGraph) -> List[Tuple[int, int]]:
    """
    List roads a->b whose reverse b->a is missing.

    Roads towards unregistered cities are reported as well.
    """
    missing = []
    for city_id, neighbour_id in graph.roads():
        if city_id == neighbour_id:
            continue
        if city_id not in graph.cities.get(neighbour_id, ()):
            missing.append((city_id, neighbour_id))
    return missing


def unregistered_neighbours(graph: CityGraph) -> List[int]:
    """List neighbour ids that were never registered as cities, in first-seen order."""
    seen = []
    for _, neighbour_id in graph.roads():
        if neighbour_id not in graph and neighbour_id not in seen:
            seen.append(neighbour_id)
    return seen


def export_graph_to_json(graph: CityGraph, filepath: str,
                         traffic: Optional[Dict[int, int]] = None) -> None:
    """
    Export city graph to JSON format.

    Args:
        graph: City graph to export
        filepath: Output file path
        traffic: Optional maximum traffic per city to include
    """
    export_data = {
        'cities': [],
        'metadata': {
            'total_cities': len(graph),
            'total_roads': sum(1 for _ in graph.roads()),
            'is_tree': is_tree_network(graph),
            'asymmetric_roads': len(asymmetric_roads(graph))
        }
    }

    for city_id, neighbours in graph.cities.items():
        entry = {
            'city_id': city_id,
            'neighbours': list(neighbours)
        }
        if traffic is not None and city_id in traffic:
            entry['max_traffic'] = traffic[city_id]
        export_data['cities'].append(entry)

    with open(filepath, 'w') as f:
        json.dump(export_data, f, indent=2)

    logger.info(f"Graph exported to {filepath}")


def export_graph_to_graphml(graph: CityGraph, filepath: str,
                            traffic: Optional[Dict[int, int]] = None) -> None:
    """
    Export city graph to GraphML format (NetworkX compatible).

    Args:
        graph: City graph to export
        filepath: Output file path
        traffic: Optional maximum traffic per city, stored as node attribute
    """
    nx_graph = _to_networkx(graph, directed=True)

    for city_id in nx_graph.nodes:
        nx_graph.nodes[city_id]['degree'] = len(graph.cities.get(city_id, ()))
        if traffic is not None and city_id in traffic:
            # GraphML integer types are signed, unsigned traffic is kept as text
            nx_graph.nodes[city_id]['max_traffic'] = str(traffic[city_id])

    nx.write_graphml(nx_graph, filepath)
    logger.info(f"Graph exported to GraphML: {filepath}")


def export_graph_snapshot(graph: CityGraph, output_dir: str, name: str,
                          traffic: Optional[Dict[int, int]] = None) -> None:
    """
    Export graph snapshot under a given name.

    Creates both JSON and GraphML exports in output_dir.
    """
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    export_graph_to_json(graph, str(output_path / f"{name}.json"), traffic)
    export_graph_to_graphml(graph, str(output_path / f"{name}.graphml"), traffic)

    logger.info(f"Graph snapshot saved as {name}")
