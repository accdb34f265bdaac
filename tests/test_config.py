from __future__ import annotations

import json

import pytest

from ai.config import DEFAULT_CONFIG_PATH, SearchConfig
from ai.minimax import DEPTH, Algorithm


def test_defaults_without_payload():
    config = SearchConfig()
    assert config.depth == DEPTH
    assert config.algorithm is Algorithm.ALPHA_BETA
    assert (config.rows, config.cols, config.connect) == (6, 7, 4)
    assert config.seed is None
    assert config.parallel_workers == 1


def test_from_json(tmp_path):
    path = tmp_path / "search.json"
    path.write_text(
        json.dumps(
            {
                "depth": 2,
                "algorithm": "plain",
                "seed": "13",
                "board": {"rows": 5, "cols": 5, "connect": 3},
                "arena": {"games": 4, "parallel_workers": 2, "base_seed": 7},
            }
        ),
        encoding="utf-8",
    )
    config = SearchConfig.from_json(path)
    assert config.depth == 2
    assert config.algorithm is Algorithm.PLAIN
    assert config.seed == 13
    assert (config.rows, config.cols, config.connect) == (5, 5, 3)
    assert config.games == 4
    assert config.parallel_workers == 2
    assert config.base_seed == 7


def test_load_uses_bundled_defaults():
    assert DEFAULT_CONFIG_PATH.exists()
    config = SearchConfig.load()
    assert config.depth == 4
    assert config.algorithm is Algorithm.ALPHA_BETA


@pytest.mark.parametrize(
    "payload",
    [
        {"algorithm": "negamax"},
        {"depth": -1},
        {"board": {"connect": 1}},
        {"board": {"rows": 0}},
        {"arena": {"games": 0}},
    ],
)
def test_invalid_payloads(payload):
    with pytest.raises(ValueError):
        SearchConfig(payload)


def test_null_sections_fall_back_to_defaults():
    config = SearchConfig({"board": None, "arena": None})
    assert (config.rows, config.cols, config.connect) == (6, 7, 4)
    assert config.games == 10


@pytest.mark.parametrize("key", ["board", "arena"])
def test_non_object_section_is_rejected(key: str):
    with pytest.raises(ValueError, match=key):
        SearchConfig({key: [6, 7]})
