"""Batch-lifetime cache of traffic per directed city path."""

from __future__ import annotations

import logging
from threading import Lock
from typing import Dict, Optional, Tuple

logger = logging.getLogger(__name__)

# Excluded direction for a root city
NO_PARENT = None

CityPath = Tuple[int, Optional[int]]


class PathTrafficCache:
  """
  Traffic aggregates keyed by directed path (city, excluded).

  (a, b) and (b, a) are distinct entries. Entries stay valid for a whole
  batch of root evaluations and are only dropped by clear().
  """

  def __init__(self) -> None:
    self._entries: Dict[CityPath, int] = {}
    self._lock = Lock()

  def get(self, city: int, excluded: Optional[int]) -> Optional[int]:
    """Return the cached traffic, or None on a miss."""
    with self._lock:
      return self._entries.get((city, excluded))

  def put(self, city: int, excluded: Optional[int], traffic: int) -> None:
    with self._lock:
      key = (city, excluded)
      if key in self._entries:
        # Each path resolves once per batch.
        logger.warning(
          f"Overwriting cached traffic for path {key}: {self._entries[key]} -> {traffic}"
        )
      self._entries[key] = traffic

  def clear(self) -> None:
    with self._lock:
      self._entries.clear()

  def __contains__(self, key: object) -> bool:
    with self._lock:
      return key in self._entries

  def __len__(self) -> int:
    with self._lock:
      return len(self._entries)

  def __repr__(self) -> str:
    return f"PathTrafficCache(entries={len(self)})"
