"""Uniform random baseline agent."""

from __future__ import annotations

import random
from typing import Optional

from ai.base_ai import BaseAI
from engine.board import Board


class RandomAI(BaseAI):
    """Plays a uniformly random legal column."""

    name = "random"

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def choose_move(self, board: Board) -> int:
        legal_moves = board.legal_moves()
        if not legal_moves:
            raise RuntimeError("No legal moves available.")
        return self._rng.choice(legal_moves)
