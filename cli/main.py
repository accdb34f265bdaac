"""CLI entrypoint for playing Connect Four against the minimax AI."""

from __future__ import annotations

import argparse
import logging
from typing import Optional

from ai.config import SearchConfig
from ai.minimax import Algorithm
from ai.minimax_ai import MinimaxAI
from engine.board import Board
from engine.marks import Mark


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Connect Four in the terminal.")
    parser.add_argument("--config", type=str, default=None, help="Path to a JSON config file")
    parser.add_argument("--depth", type=int, default=None, help="Search depth (overrides config)")
    parser.add_argument(
        "--algorithm",
        type=str,
        default=None,
        choices=[algorithm.value for algorithm in Algorithm],
        help="Search variant (overrides config)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Tie-break seed for the AI")
    parser.add_argument(
        "--human-side",
        type=str,
        default="x",
        choices=["x", "o"],
        help="Which mark the human plays; x moves first",
    )
    parser.add_argument("--log-level", type=str, default="INFO", help="Python logging level")
    return parser.parse_args()


def parse_user_move(command: str) -> Optional[int]:
    parts = command.strip().split()
    if len(parts) != 1:
        return None
    return int(parts[0])


def run_cli() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    logger = logging.getLogger("connect.cli")

    config = SearchConfig.load(args.config)
    depth = config.depth if args.depth is None else args.depth
    algorithm = config.algorithm if args.algorithm is None else Algorithm(args.algorithm)
    seed = config.seed if args.seed is None else args.seed

    board = Board.new(rows=config.rows, cols=config.cols, connect=config.connect)
    ai = MinimaxAI(depth=depth, algorithm=algorithm, seed=seed)
    human_side = Mark(args.human_side)

    logger.info(
        "Starting game. Human=%s AI=%s depth=%d algorithm=%s",
        human_side.value,
        human_side.opponent().value,
        depth,
        algorithm.value,
    )
    print("Commands: <column> | help | quit")

    while True:
        terminal, winner, is_draw = board.game_over()
        print()
        print(board.render_ascii())
        print(f"Turn: {board.next_mover.value} | Ply: {board.ply_count}")

        if terminal:
            if is_draw:
                print("Game ended in draw.")
            else:
                print(f"Winner: {winner.value if winner else 'none'}")
            break

        if board.next_mover is human_side:
            user_input = input("Your move> ").strip()
            if user_input.lower() in {"quit", "exit"}:
                print("Exiting game.")
                break
            if user_input.lower() == "help":
                print(f"Enter a column between 0 and {board.cols - 1}, or quit.")
                continue

            try:
                move = parse_user_move(user_input)
                if move is None:
                    print("Invalid command format.")
                    continue
                if move not in board.legal_moves():
                    print("Illegal move for current state.")
                    continue
                board = board.play(move)
            except ValueError:
                print("Invalid numeric input.")
                continue
        else:
            ai_move = ai.choose_move(board)
            board = board.play(ai_move)
            print(f"AI move: column {ai_move} ({ai.last_stats.nodes} nodes searched)")


if __name__ == "__main__":
    run_cli()
