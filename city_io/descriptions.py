"""Parser for textual city descriptions such as ``2:[5,15,7]`` or ``13:[]``."""

import logging
import re
from pathlib import Path
from typing import Iterable, List, Optional

from pydantic import BaseModel, Field, NonNegativeInt

from config.engine import EngineConfig
from graph_manager.city_graph import CityGraph
from graph_manager.graph_utils import unregistered_neighbours

logger = logging.getLogger(__name__)

_DESCRIPTION_RE = re.compile(r"^\s*(\d+)\s*:\s*\[(.*)\]\s*$")
_CITY_ID_RE = re.compile(r"^\s*(\d+)\s*$")


class MalformedDescriptionError(ValueError):
    """Raised when a city description cannot be parsed or is inconsistent."""

    def __init__(self, message: str, line: Optional[str] = None):
        self.line = line
        super().__init__(message if line is None else f"{message}: {line!r}")


class CityDescription(BaseModel):
    """One city and its ordered neighbour list."""

    city: NonNegativeInt = Field(description="City identifier")
    neighbours: List[NonNegativeInt] = Field(
        default_factory=list, description="Neighbouring city ids in road order"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "city": 2,
                "neighbours": [5, 15, 7]
            }
        }


def parse_description(line: str) -> CityDescription:
    """
    Parse a single description line.

    Raises:
        MalformedDescriptionError: line does not follow ``id:[n1,n2,...]``
    """
    match = _DESCRIPTION_RE.match(line)
    if not match:
        raise MalformedDescriptionError("Expected '<id>:[<n1>,<n2>,...]'", line)

    city = int(match.group(1))
    body = match.group(2).strip()
    neighbours = []
    if body:
        for token in body.split(","):
            token_match = _CITY_ID_RE.match(token)
            if not token_match:
                raise MalformedDescriptionError(f"Invalid neighbour id {token.strip()!r}", line)
            neighbours.append(int(token_match.group(1)))

    return CityDescription(city=city, neighbours=neighbours)


def parse_descriptions(lines: Iterable[str]) -> List[CityDescription]:
    """Parse description lines, skipping blank lines and ``#`` comments."""
    descriptions = []
    for line in lines:
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        descriptions.append(parse_description(stripped))
    return descriptions


def load_description_file(path: str) -> List[CityDescription]:
    """Read city descriptions from a text file, one per line."""
    with open(Path(path), "r", encoding="utf-8") as f:
        descriptions = parse_descriptions(f)
    logger.info(f"Read {len(descriptions)} city descriptions from {path}")
    return descriptions


def build_graph(descriptions: Iterable[CityDescription],
                config: Optional[EngineConfig] = None) -> CityGraph:
    """
    Build a CityGraph from descriptions.

    Every described city is registered before any road is added, so
    neighbour order is preserved regardless of description order.
    Repeated descriptions of a city append to its neighbour list.

    Raises:
        MalformedDescriptionError: a neighbour is never described itself
    """
    config = config or EngineConfig()
    descriptions = list(descriptions)
    graph = CityGraph(reserve_zero_id=config.reserve_zero_id)

    for description in descriptions:
        graph.add_city(description.city)
    for description in descriptions:
        for neighbour in description.neighbours:
            graph.add_road(description.city, neighbour)

    missing = unregistered_neighbours(graph)
    if missing:
        raise MalformedDescriptionError(f"Neighbours without a description: {missing}")

    logger.debug(f"Built {graph}")
    return graph
