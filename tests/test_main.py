"""Tests for the command line entry point."""

import json
import logging

import pytest

import main
from config.settings import get_settings

STAR = ["1:[5]", "2:[5]", "3:[5]", "4:[5]", "5:[1,2,3,4]"]


@pytest.fixture(autouse=True)
def isolated_cli(monkeypatch, tmp_path):
    """Keep root logging and cached settings from leaking between tests."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CITYTRAFFIC_OUTPUT_DIR", str(tmp_path / "output"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def test_prints_serialized_results(capsys):
    assert main.main(STAR) == 0

    assert capsys.readouterr().out.strip() == "1:14,2:13,3:12,4:11,5:4"


def test_prints_json_results(capsys):
    assert main.main(STAR + ["--json"]) == 0

    assert json.loads(capsys.readouterr().out) == {"1": 14, "2": 13, "3": 12, "4": 11, "5": 4}


def test_reads_input_file(tmp_path, capsys):
    path = tmp_path / "city.txt"
    path.write_text("1:[5]\n2:[5,18]\n3:[5,12]\n4:[5]\n5:[1,2,3,4]\n18:[2]\n12:[3]\n")

    assert main.main(["--input", str(path)]) == 0

    assert capsys.readouterr().out.strip() == "1:44,2:25,3:30,4:41,5:20,12:33,18:27"


def test_self_check(capsys):
    assert main.main(["--self-check"]) == 0

    assert "4/4 regression cases passed" in capsys.readouterr().out


def test_malformed_input_fails():
    assert main.main(["1:[5", "5:[1]"]) == 1


def test_missing_input_file_fails(tmp_path):
    assert main.main(["--input", str(tmp_path / "missing.txt")]) == 1


def test_no_descriptions():
    assert main.main([]) == 2


def test_strict_tree_rejects_cycle():
    assert main.main(["1:[2,3]", "2:[1,3]", "3:[1,2]", "--strict-tree"]) == 1


def test_reserve_zero_id_rejects_city_zero():
    assert main.main(["0:[1]", "1:[0]", "--reserve-zero-id"]) == 1
    assert main.main(["0:[1]", "1:[0]"]) == 0


def test_exports(tmp_path):
    json_path = tmp_path / "out" / "star.json"
    graphml_path = tmp_path / "out" / "star.graphml"

    assert main.main(STAR + ["--export-json", str(json_path),
                             "--export-graphml", str(graphml_path),
                             "--snapshot", "star"]) == 0

    assert json_path.exists()
    assert graphml_path.exists()
    assert (tmp_path / "output" / "star.json").exists()


def test_log_dir_creates_log_file(tmp_path):
    log_dir = tmp_path / "logs"

    assert main.main(STAR + ["--log-dir", str(log_dir), "--log-level", "DEBUG"]) == 0

    assert list(log_dir.glob("citytraffic_*.log"))
