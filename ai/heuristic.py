"""Static position evaluation from line-count features."""

from __future__ import annotations

from typing import Protocol, Sequence, Tuple

LINE_LENGTHS: Tuple[int, ...] = (2, 3, 4)
LINE_WEIGHT_BASE = 100


class Player(Protocol):
    def opponent(self) -> "Player":
        ...


class GameState(Protocol):
    """
    Read-only view of a position consumed by the search.

    `successors` must be finite and free of side effects; an empty sequence
    marks a finished game. Search behaviour on cyclic or unbounded successor
    chains is undefined.
    """

    @property
    def next_mover(self) -> Player:
        ...

    def successors(self) -> Sequence["GameState"]:
        ...

    def num_lines(self, length: int, player: Player) -> int:
        ...


def advantage(state: GameState, player: Player) -> int:
    """
    Weighted line count for one player.

    Each line of length n is worth 100 ** n, so one line of four outweighs
    every plausible combination of shorter lines on a normal board.
    """
    return sum(state.num_lines(length, player) * LINE_WEIGHT_BASE**length for length in LINE_LENGTHS)


def heuristic(state: GameState, maximizing_player: Player) -> int:
    """Maximizing player's advantage less the opponent's."""
    minimizing_player = maximizing_player.opponent()
    return advantage(state, maximizing_player) - advantage(state, minimizing_player)
