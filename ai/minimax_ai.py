"""Minimax agent that turns search scores into column choices."""

from __future__ import annotations

import logging
import math
import random
from typing import List, Optional, Tuple

from ai.base_ai import BaseAI
from ai.minimax import DEPTH, Algorithm, SearchStats, decide
from engine.board import Board

LOGGER = logging.getLogger(__name__)


class MinimaxAI(BaseAI):
    """Scores every legal column with the decision search and plays the best."""

    name = "minimax"

    def __init__(
        self,
        depth: int = DEPTH,
        algorithm: Algorithm | str = Algorithm.ALPHA_BETA,
        seed: Optional[int] = None,
        debug_top_k: int = 3,
    ) -> None:
        if depth < 0:
            raise ValueError(f"Search depth must be non-negative, got {depth}")
        self.depth = depth
        self.algorithm = Algorithm(algorithm)
        self.debug_top_k = max(1, debug_top_k)
        self._rng = random.Random(seed)
        self.last_stats = SearchStats()

    def describe(self) -> str:
        return f"{self.name}(depth={self.depth}, {self.algorithm.value})"

    def score_moves(self, board: Board) -> List[Tuple[int, float]]:
        """Return (column, score) for every legal column, from the mover's perspective."""
        perspective = board.next_mover
        stats = SearchStats()
        scored: List[Tuple[int, float]] = []
        for col in board.legal_moves():
            child = board.play(col)
            value = decide(child, perspective, self.depth, self.algorithm, stats)
            scored.append((col, value))
        self.last_stats = stats
        return scored

    def choose_move(self, board: Board) -> int:
        """Choose the best-scoring column; ties are broken at random."""
        scored = self.score_moves(board)
        if not scored:
            raise RuntimeError("No legal moves available.")

        best_value = -math.inf
        best_moves: List[int] = []
        for col, value in scored:
            if value > best_value:
                best_value = value
                best_moves = [col]
            elif value == best_value:
                best_moves.append(col)

        chosen = self._rng.choice(best_moves)
        self._log_diagnostics(scored, chosen)
        LOGGER.debug(
            "Minimax(%s, depth=%d) selected column %d with score %s after %d nodes",
            self.algorithm.value,
            self.depth,
            chosen,
            best_value,
            self.last_stats.nodes,
        )
        return chosen

    def _log_diagnostics(self, scored: List[Tuple[int, float]], chosen: int) -> None:
        """Emit top-k candidate breakdown when DEBUG is enabled."""
        if not LOGGER.isEnabledFor(logging.DEBUG):
            return
        ranked = sorted(scored, key=lambda item: item[1], reverse=True)
        for idx, (col, value) in enumerate(ranked[: self.debug_top_k], start=1):
            LOGGER.debug("Candidate #%d column=%d eval=%s chosen=%s", idx, col, value, col == chosen)
