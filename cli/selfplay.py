"""CLI command to run AI-vs-AI Connect Four matches."""

from __future__ import annotations

import argparse
import logging

from ai.config import SearchConfig
from arena.match import AGENT_KINDS, AgentSpec, MatchConfig, MatchRunner

LOGGER = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run AI-vs-AI Connect Four matches.")
    parser.add_argument("--config", type=str, default=None, help="Path to a JSON config file")
    parser.add_argument("--x-ai", type=str, default="minimax", choices=AGENT_KINDS)
    parser.add_argument("--o-ai", type=str, default="random", choices=AGENT_KINDS)
    parser.add_argument("--x-depth", type=int, default=None, help="X search depth (defaults to config)")
    parser.add_argument("--o-depth", type=int, default=None, help="O search depth (defaults to config)")
    parser.add_argument("--games", type=int, default=None, help="Number of games (defaults to config)")
    parser.add_argument("--workers", type=int, default=None, help="Parallel worker processes")
    parser.add_argument("--log-level", type=str, default="INFO", help="Python logging level")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    config = SearchConfig.load(args.config)
    x_spec = AgentSpec(
        kind=args.x_ai,
        depth=config.depth if args.x_depth is None else args.x_depth,
        algorithm=config.algorithm.value,
    )
    o_spec = AgentSpec(
        kind=args.o_ai,
        depth=config.depth if args.o_depth is None else args.o_depth,
        algorithm=config.algorithm.value,
    )
    match_config = MatchConfig(
        rows=config.rows,
        cols=config.cols,
        connect=config.connect,
        parallel_workers=config.parallel_workers if args.workers is None else args.workers,
        base_seed=config.base_seed,
        opening_plies=config.opening_plies,
        log_every=config.log_every,
    )
    games = config.games if args.games is None else args.games

    runner = MatchRunner(match_config)
    records = runner.run_games_parallel_from_specs(x_spec, o_spec, n_games=games)
    summary = runner.summarize(records)
    LOGGER.info("Arena %s(x) vs %s(o) over %d games: %s", x_spec.kind, o_spec.kind, games, summary)
    print(f"x wins: {summary['x_wins']}  o wins: {summary['o_wins']}  draws: {summary['draws']}")


if __name__ == "__main__":
    main()
