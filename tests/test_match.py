from __future__ import annotations

import pytest

from ai.minimax_ai import MinimaxAI
from ai.random_ai import RandomAI
from arena.match import AgentSpec, GameRecord, MatchConfig, MatchRunner, build_agent_from_spec
from engine.marks import Mark


def test_serial_games_produce_complete_records():
    runner = MatchRunner(MatchConfig(base_seed=5, log_every=1))
    records = runner.run_games(RandomAI(seed=1), RandomAI(seed=2), n_games=4)
    assert len(records) == 4
    for record in records:
        assert record.plies == len(record.moves)
        assert record.is_draw or record.winner in (Mark.X, Mark.O)
    summary = runner.summarize(records)
    assert sum(summary.values()) == 4


def test_seeded_games_are_reproducible():
    config = MatchConfig(base_seed=42, opening_plies=2)
    first = MatchRunner(config).run_games(MinimaxAI(depth=1, seed=1), RandomAI(seed=2), n_games=2)
    second = MatchRunner(config).run_games(MinimaxAI(depth=1, seed=1), RandomAI(seed=2), n_games=2)
    assert [r.moves for r in first] == [r.moves for r in second]


def test_minimax_beats_random_on_small_board():
    config = MatchConfig(rows=4, cols=5, base_seed=3, opening_plies=0)
    records = MatchRunner(config).run_games_parallel_from_specs(
        AgentSpec(kind="minimax", depth=2),
        AgentSpec(kind="random"),
        n_games=3,
    )
    summary = MatchRunner.summarize(records)
    assert sum(summary.values()) == 3
    assert summary["x_wins"] >= 1


def test_parallel_games_from_specs():
    config = MatchConfig(rows=4, cols=5, base_seed=9, parallel_workers=2)
    records = MatchRunner(config).run_games_parallel_from_specs(
        AgentSpec(kind="random"),
        AgentSpec(kind="minimax", depth=1, algorithm="plain"),
        n_games=4,
    )
    assert len(records) == 4
    assert sum(MatchRunner.summarize(records).values()) == 4


def test_summarize_counts_outcomes():
    records = [
        GameRecord(winner=Mark.X, is_draw=False, plies=7),
        GameRecord(winner=Mark.O, is_draw=False, plies=8),
        GameRecord(winner=None, is_draw=True, plies=42),
        GameRecord(winner=Mark.X, is_draw=False, plies=9),
    ]
    assert MatchRunner.summarize(records) == {"x_wins": 2, "o_wins": 1, "draws": 1}


def test_build_agent_from_spec():
    agent = build_agent_from_spec(AgentSpec(kind="minimax", depth=3, algorithm="plain"), seed=1)
    assert isinstance(agent, MinimaxAI)
    assert agent.depth == 3
    assert isinstance(build_agent_from_spec(AgentSpec(kind="random"), seed=1), RandomAI)
    with pytest.raises(ValueError):
        build_agent_from_spec(AgentSpec(kind="mcts"), seed=None)


@pytest.mark.parametrize("o_kind", ["random", "minimax"])
def test_worker_count_does_not_change_games(o_kind: str):
    x_spec = AgentSpec(kind="random")
    o_spec = AgentSpec(kind=o_kind, depth=1)
    serial = MatchRunner(MatchConfig(rows=4, cols=5, base_seed=9, parallel_workers=1)).run_games_parallel_from_specs(
        x_spec, o_spec, n_games=4
    )
    parallel = MatchRunner(MatchConfig(rows=4, cols=5, base_seed=9, parallel_workers=2)).run_games_parallel_from_specs(
        x_spec, o_spec, n_games=4
    )
    assert [record.moves for record in serial] == [record.moves for record in parallel]
