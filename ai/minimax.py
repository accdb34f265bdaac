"""
Fixed-depth adversarial search: plain minimax and alpha-beta.

Both variants score a position from one fixed perspective for the whole call
tree. Only the comparison direction changes between levels, chosen by whether
the node's next mover is the maximizing player; scores are never negated.

For every position, depth and perspective `minimax_alpha_beta` returns exactly
what `minimax` returns. It only visits fewer nodes. Errors raised by the state
(for example while generating successors) propagate unchanged.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from ai.heuristic import GameState, Player, heuristic

DEPTH = 4


class Algorithm(str, Enum):
    """Search variant backing the decision wrapper."""

    PLAIN = "plain"
    ALPHA_BETA = "alpha_beta"


@dataclass
class SearchStats:
    """Caller-owned node counter."""

    nodes: int = 0


def is_base_case(state: GameState, depth: int, children: Optional[Sequence[GameState]] = None) -> bool:
    """
    True when the search must evaluate instead of recursing.

    Callers that already hold the successors pass them as `children` so they
    are not generated twice.
    """
    if depth == 0:
        return True
    if children is None:
        children = state.successors()
    return len(children) == 0


def minimax(
    state: GameState,
    depth: int,
    maximizing_player: Player,
    stats: Optional[SearchStats] = None,
) -> int:
    """Exhaustive minimax value of `state` searched `depth` plies deep."""
    if stats is not None:
        stats.nodes += 1
    children = state.successors() if depth > 0 else ()
    if is_base_case(state, depth, children):
        return heuristic(state, maximizing_player)

    values = [minimax(child, depth - 1, maximizing_player, stats) for child in children]
    if state.next_mover == maximizing_player:
        return max(values)
    return min(values)


def minimax_alpha_beta(
    state: GameState,
    depth: int,
    maximizing_player: Player,
    stats: Optional[SearchStats] = None,
) -> int:
    """Alpha-beta pruned minimax; same value as `minimax`, fewer nodes."""

    def inner(node: GameState, remaining: int, alpha: float, beta: float) -> int:
        if stats is not None:
            stats.nodes += 1
        children = node.successors() if remaining > 0 else ()
        if is_base_case(node, remaining, children):
            return heuristic(node, maximizing_player)

        if node.next_mover == maximizing_player:
            best = alpha
            for child in children:
                value = inner(child, remaining - 1, alpha, beta)
                best = max(best, value)
                alpha = max(alpha, value)
                if alpha > beta:
                    return best
            return best

        best = beta
        for child in children:
            value = inner(child, remaining - 1, alpha, beta)
            best = min(best, value)
            beta = min(beta, value)
            if alpha > beta:
                return best
        return best

    return inner(state, depth, -math.inf, math.inf)


def search(
    state: GameState,
    depth: int,
    maximizing_player: Player,
    algorithm: Algorithm = Algorithm.ALPHA_BETA,
    stats: Optional[SearchStats] = None,
) -> int:
    """Dispatch to the selected search variant. Unknown names raise ValueError."""
    if Algorithm(algorithm) is Algorithm.PLAIN:
        return minimax(state, depth, maximizing_player, stats)
    return minimax_alpha_beta(state, depth, maximizing_player, stats)


def decide(
    state: GameState,
    maximizing_player: Player,
    depth: int = DEPTH,
    algorithm: Algorithm = Algorithm.ALPHA_BETA,
    stats: Optional[SearchStats] = None,
) -> int:
    """Score used by live play: pruned search at the configured depth."""
    return search(state, depth, maximizing_player, algorithm, stats)


minimax_wrapper = decide
