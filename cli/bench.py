"""
Benchmark: nodes visited and time for plain minimax vs alpha-beta.

Every position is searched with both variants at the same depth and
perspective. The scores must match exactly; the node counts show how much
work pruning saves.

Usage: python -m cli.bench --depth 4
"""

from __future__ import annotations

import argparse
import logging
import time
from typing import Dict, List, Sequence, Tuple

from ai.minimax import DEPTH, Algorithm, SearchStats, search
from engine.board import Board

LOGGER = logging.getLogger(__name__)

# Fixed move sequences (columns, x first) so every run compares the same positions.
POSITIONS: List[Tuple[str, Sequence[int]]] = [
    ("Empty", ()),
    ("Centre", (3,)),
    ("Centre reply", (3, 3)),
    ("Open middle", (3, 2, 4, 3)),
    ("Edge play", (0, 6, 1, 5, 0)),
    ("Stacked", (3, 3, 3, 3, 2, 4)),
    ("Threat", (3, 4, 2, 4, 1)),
    ("Crowded", (3, 3, 4, 4, 5, 2, 2, 5, 1, 6)),
]


def build_position(moves: Sequence[int]) -> Board:
    board = Board.new()
    for col in moves:
        board = board.play(col)
    return board


def run_position(label: str, board: Board, depth: int) -> Dict[str, object]:
    """Search one position with both variants and collect metrics."""
    result: Dict[str, object] = {"label": label}
    for algorithm in (Algorithm.PLAIN, Algorithm.ALPHA_BETA):
        stats = SearchStats()
        start = time.perf_counter()
        score = search(board, depth, board.next_mover, algorithm, stats)
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        result[f"{algorithm.value}_score"] = score
        result[f"{algorithm.value}_nodes"] = stats.nodes
        result[f"{algorithm.value}_ms"] = elapsed_ms
    return result


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compare plain minimax and alpha-beta node counts.")
    parser.add_argument("--depth", type=int, default=DEPTH, help="Search depth")
    parser.add_argument("--log-level", type=str, default="WARNING", help="Python logging level")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))

    print(f"Search benchmark at depth {args.depth}")
    print()
    print(f"{'Position':<14} {'Score':>12} {'Plain':>9} {'AlphaBeta':>10} {'Saved':>7} {'Plain ms':>9} {'AB ms':>8}")
    print("-" * 75)

    mismatches = 0
    total_plain = total_pruned = 0
    for label, moves in POSITIONS:
        r = run_position(label, build_position(moves), args.depth)
        plain_nodes = int(r["plain_nodes"])
        pruned_nodes = int(r["alpha_beta_nodes"])
        total_plain += plain_nodes
        total_pruned += pruned_nodes
        if r["plain_score"] != r["alpha_beta_score"]:
            mismatches += 1
            LOGGER.error(
                "Score mismatch on %s: plain=%s alpha_beta=%s",
                label,
                r["plain_score"],
                r["alpha_beta_score"],
            )
        saved = 1.0 - pruned_nodes / max(1, plain_nodes)
        print(
            f"{label:<14} {r['alpha_beta_score']:>12} {plain_nodes:>9,} {pruned_nodes:>10,} "
            f"{saved:>7.1%} {r['plain_ms']:>9.1f} {r['alpha_beta_ms']:>8.1f}"
        )

    print("-" * 75)
    print(f"{'TOTAL':<14} {'':>12} {total_plain:>9,} {total_pruned:>10,} {1.0 - total_pruned / max(1, total_plain):>7.1%}")
    if mismatches:
        raise SystemExit(f"{mismatches} position(s) scored differently between variants")


if __name__ == "__main__":
    main()
