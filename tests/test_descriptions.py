"""Tests for city description parsing and result rendering."""

import pytest
from pydantic import ValidationError

from city_io.descriptions import (
    CityDescription,
    MalformedDescriptionError,
    build_graph,
    load_description_file,
    parse_description,
    parse_descriptions
)
from city_io.results import results_to_dict, serialize_results
from config.engine import EngineConfig
from graph_manager.errors import SentinelCollisionError
from traffic_engine.batch import CityTraffic


def test_parse_description_with_neighbours():
    description = parse_description("2:[5,15,7]")

    assert description.city == 2
    assert description.neighbours == [5, 15, 7]


def test_parse_description_without_neighbours():
    assert parse_description("13:[]").neighbours == []


def test_parse_description_tolerates_whitespace():
    description = parse_description("  3 : [ 2, 4 ,5 ] ")

    assert description == CityDescription(city=3, neighbours=[2, 4, 5])


@pytest.mark.parametrize("line", [
    "3-[2]",
    "x:[1]",
    "-1:[2]",
    "3:[2,,4]",
    "3:[2,-4]",
    "3:[2",
    "3:[2] extra",
])
def test_malformed_lines_rejected(line):
    with pytest.raises(MalformedDescriptionError) as exc_info:
        parse_description(line)

    assert exc_info.value.line == line


def test_parse_descriptions_skips_blanks_and_comments():
    descriptions = parse_descriptions(["# star", "", "1:[5]", "   ", "5:[1]"])

    assert [d.city for d in descriptions] == [1, 5]


def test_description_model_rejects_negative_ids():
    with pytest.raises(ValidationError):
        CityDescription(city=-1)
    with pytest.raises(ValidationError):
        CityDescription(city=1, neighbours=[2, -3])


def test_build_graph_appends_repeated_descriptions():
    graph = build_graph(parse_descriptions(["1:[2]", "2:[1]", "1:[3]", "3:[1]"]))

    assert graph.neighbours_of(1) == [2, 3]
    assert graph.city_ids() == [1, 2, 3]


def test_build_graph_rejects_undescribed_neighbours():
    with pytest.raises(MalformedDescriptionError, match="without a description"):
        build_graph(parse_descriptions(["1:[2,9]", "2:[1]"]))


def test_build_graph_reserved_zero():
    descriptions = parse_descriptions(["0:[1]", "1:[0]"])

    with pytest.raises(SentinelCollisionError):
        build_graph(descriptions, EngineConfig(reserve_zero_id=True))

    graph = build_graph(descriptions)
    assert graph.neighbours_of(0) == [1]


def test_load_description_file(tmp_path):
    path = tmp_path / "star.txt"
    path.write_text("# star with center 5\n1:[5]\n2:[5]\n5:[1,2]\n", encoding="utf-8")

    descriptions = load_description_file(str(path))

    assert [d.city for d in descriptions] == [1, 2, 5]
    assert descriptions[2].neighbours == [1, 2]


def test_serialize_results():
    results = [CityTraffic(1, 14), CityTraffic(2, 13), CityTraffic(5, 4)]

    assert serialize_results(results) == "1:14,2:13,5:4"
    assert serialize_results([]) == ""


def test_results_to_dict_keeps_order():
    results = [CityTraffic(1, 14), CityTraffic(12, 33)]

    assert list(results_to_dict(results).items()) == [("1", 14), ("12", 33)]
