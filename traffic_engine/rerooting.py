"""Rerooting traversal that resolves maximum traffic for every root city."""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from config.engine import EngineConfig
from graph_manager.city_graph import CityGraph
from .path_cache import NO_PARENT, CityPath, PathTrafficCache

logger = logging.getLogger(__name__)


@dataclass
class ResolveStats:
    """Counters describing how much work the engine performed."""

    evaluations: Counter = field(default_factory=Counter)  # CityPath -> body executions
    cache_hits: int = 0

    def evaluated_paths(self) -> List[CityPath]:
        """Paths whose traffic was computed at least once."""
        return list(self.evaluations)

    def reset(self) -> None:
        self.evaluations.clear()
        self.cache_hits = 0


@dataclass
class _Frame:
    """Pending resolution of one directed path."""

    city: int
    excluded: Optional[int]
    neighbours: List[int]
    remaining: Iterator[int]


class RerootingEngine:
    """
    Computes the maximum traffic of a root city.

    The traffic of a directed path (city, excluded) is the sum, over every
    neighbour n of city except excluded and city itself, of n plus the
    traffic recorded for n in the working set. The working set is shared
    by all branches of one root evaluation and doubles as the guard
    against re-entering a city. Resolved paths go to the batch-wide
    PathTrafficCache so later roots reuse them.

    Only trees give meaningful results. On cyclic networks the guard stops
    the traversal but the sums depend on visiting order.
    """

    def __init__(self, graph: CityGraph, cache: PathTrafficCache,
                 config: Optional[EngineConfig] = None):
        """
        Initialize rerooting engine.

        Args:
            graph: City network to traverse
            cache: Directed path cache shared by all roots of a batch
            config: Engine configuration
        """
        self.graph = graph
        self.cache = cache
        self.config = config or EngineConfig()
        self.working_set: Dict[int, int] = {}
        self.stats = ResolveStats()

    def resolve(self, city: int, excluded: Optional[int] = NO_PARENT) -> int:
        """
        Resolve the traffic of the path (city, excluded).

        Neighbours not yet in the working set are entered with a zero
        placeholder before they are resolved themselves. A path with an
        excluded direction is resolved as if entered from that direction,
        so city gets the same placeholder. Resolution uses an explicit
        stack so path-like trees deeper than the interpreter recursion
        limit still resolve, visiting cities in the same order a recursive
        descent would.

        Raises:
            CityNotFoundError: a neighbour was never registered as a city
        """
        if excluded is not NO_PARENT:
            self.working_set.setdefault(city, 0)
        cached = self._cached(city, excluded)
        if cached is not None:
            return cached

        stack = [self._open_frame(city, excluded)]
        traffic = 0
        while stack:
            frame = stack[-1]
            child = self._next_child(frame)
            if child is not None:
                stack.append(child)
                continue
            stack.pop()
            traffic = self._close_frame(frame)
        return traffic

    def compute_max_traffic(self, root: int) -> int:
        """
        Compute the maximum traffic reachable from root through one neighbour.

        The per-neighbour traffic is read back from the working set after
        resolving (root, NO_PARENT). First neighbour wins ties. A root with
        no neighbours yields 0.
        """
        self.resolve(root, NO_PARENT)

        mask = self.config.mask
        max_traffic = 0
        for neighbour in self.graph.neighbours_of(root):
            if neighbour == root:
                continue
            traffic = (neighbour + self.working_set.get(neighbour, 0)) & mask
            if traffic > max_traffic:
                max_traffic = traffic

        logger.debug(f"Root {root}: max traffic {max_traffic} "
                     f"(working set {len(self.working_set)} cities)")
        return max_traffic

    def reset_working_set(self) -> None:
        """Discard per-root state."""
        self.working_set.clear()

    def _cached(self, city: int, excluded: Optional[int]) -> Optional[int]:
        cached = self.cache.get(city, excluded)
        if cached is not None:
            self.stats.cache_hits += 1
            self.working_set[city] = cached
        return cached

    def _open_frame(self, city: int, excluded: Optional[int]) -> _Frame:
        neighbours = self.graph.neighbours_of(city)
        if self.config.track_evaluations:
            self.stats.evaluations[(city, excluded)] += 1
        return _Frame(city, excluded, neighbours, iter(neighbours))

    def _next_child(self, frame: _Frame) -> Optional[_Frame]:
        """Advance frame to its next neighbour that still needs resolving."""
        for neighbour in frame.remaining:
            if neighbour == frame.city or neighbour in self.working_set:
                continue
            # Placeholder keeps the neighbour from being re-entered in this pass
            self.working_set[neighbour] = 0
            if self._cached(neighbour, frame.city) is not None:
                continue
            return self._open_frame(neighbour, frame.city)
        return None

    def _close_frame(self, frame: _Frame) -> int:
        """Sum the neighbour traffic of a fully explored frame and record it."""
        mask = self.config.mask
        traffic = 0
        for neighbour in frame.neighbours:
            if neighbour == frame.excluded or neighbour == frame.city:
                continue
            traffic = (traffic + neighbour + self.working_set.get(neighbour, 0)) & mask

        self.cache.put(frame.city, frame.excluded, traffic)
        self.working_set[frame.city] = traffic
        return traffic
