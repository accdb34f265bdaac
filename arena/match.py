"""AI-vs-AI match runner for connect games."""

from __future__ import annotations

import logging
import multiprocessing as mp
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from ai.base_ai import BaseAI
from ai.minimax import DEPTH, Algorithm
from ai.minimax_ai import MinimaxAI
from ai.random_ai import RandomAI
from engine.board import Board
from engine.marks import Mark
from engine.rules import BOARD_COLS, BOARD_ROWS, CONNECT_LENGTH

LOGGER = logging.getLogger(__name__)

AGENT_KINDS = ("minimax", "random")


@dataclass
class AgentSpec:
    """Serializable agent descriptor for workers."""

    kind: str  # minimax or random
    depth: int = DEPTH
    algorithm: str = Algorithm.ALPHA_BETA.value


@dataclass
class MatchConfig:
    """Match generation config."""

    rows: int = BOARD_ROWS
    cols: int = BOARD_COLS
    connect: int = CONNECT_LENGTH
    parallel_workers: int = 1
    base_seed: Optional[int] = None
    opening_plies: int = 0
    log_every: int = 10


@dataclass
class GameRecord:
    """Outcome and move list for one full game."""

    winner: Optional[Mark]
    is_draw: bool
    plies: int
    moves: List[int] = field(default_factory=list)


def build_agent_from_spec(spec: AgentSpec, seed: Optional[int]) -> BaseAI:
    if spec.kind == "minimax":
        return MinimaxAI(depth=spec.depth, algorithm=spec.algorithm, seed=seed)
    if spec.kind == "random":
        return RandomAI(seed=seed)
    raise ValueError(f"Unsupported AgentSpec kind: {spec.kind}")


def _simulate_single_game(
    x_ai: BaseAI,
    o_ai: BaseAI,
    config: MatchConfig,
    seed: Optional[int],
) -> GameRecord:
    board = Board.new(rows=config.rows, cols=config.cols, connect=config.connect)
    opening_rng = random.Random(seed)
    moves: List[int] = []

    done, winner, is_draw = board.game_over()
    while not done:
        if len(moves) < config.opening_plies:
            move = opening_rng.choice(board.legal_moves())
        else:
            actor = x_ai if board.next_mover is Mark.X else o_ai
            move = actor.choose_move(board)
        board = board.play(move)
        moves.append(move)
        done, winner, is_draw = board.game_over()

    return GameRecord(winner=winner, is_draw=is_draw, plies=board.ply_count, moves=moves)


def _parallel_worker(
    game_index: int,
    x_spec: AgentSpec,
    o_spec: AgentSpec,
    config: MatchConfig,
) -> GameRecord:
    seed = None if config.base_seed is None else config.base_seed + game_index
    x_ai = build_agent_from_spec(x_spec, seed=seed)
    o_ai = build_agent_from_spec(o_spec, seed=None if seed is None else seed + 9973)
    return _simulate_single_game(x_ai, o_ai, config=config, seed=seed)


class MatchRunner:
    """Runs AI-vs-AI games and returns their records."""

    def __init__(self, config: MatchConfig) -> None:
        self.config = config

    def run_games(self, x_ai: BaseAI, o_ai: BaseAI, n_games: int) -> List[GameRecord]:
        LOGGER.info("Arena start: %s (x) vs %s (o), %d games", x_ai.describe(), o_ai.describe(), n_games)
        records: List[GameRecord] = []
        for game_index in range(n_games):
            seed = None if self.config.base_seed is None else self.config.base_seed + game_index
            record = _simulate_single_game(x_ai, o_ai, config=self.config, seed=seed)
            records.append(record)
            self._log_record(game_index, n_games, record, mode="serial")
        return records

    def run_games_parallel_from_specs(
        self,
        x_spec: AgentSpec,
        o_spec: AgentSpec,
        n_games: int,
    ) -> List[GameRecord]:
        LOGGER.info("Arena start: %s (x) vs %s (o), %d games", x_spec.kind, o_spec.kind, n_games)
        args = [(idx, x_spec, o_spec, self.config) for idx in range(n_games)]
        if self.config.parallel_workers <= 1:
            records = [_parallel_worker(*game_args) for game_args in args]
            mode = "serial"
        else:
            with mp.Pool(processes=self.config.parallel_workers) as pool:
                records = pool.starmap(_parallel_worker, args)
            mode = "parallel"

        for idx, record in enumerate(records):
            self._log_record(idx, n_games, record, mode=mode)
        return records

    @staticmethod
    def summarize(records: Sequence[GameRecord]) -> Dict[str, int]:
        summary = {"x_wins": 0, "o_wins": 0, "draws": 0}
        for record in records:
            if record.is_draw:
                summary["draws"] += 1
            elif record.winner is Mark.X:
                summary["x_wins"] += 1
            elif record.winner is Mark.O:
                summary["o_wins"] += 1
        return summary

    def _log_record(self, game_index: int, n_games: int, record: GameRecord, mode: str) -> None:
        if (game_index + 1) % max(1, self.config.log_every) != 0:
            return
        LOGGER.info(
            "Arena %s game %d/%d | winner=%s draw=%s plies=%d",
            mode,
            game_index + 1,
            n_games,
            record.winner.value if record.winner else None,
            record.is_draw,
            record.plies,
        )
