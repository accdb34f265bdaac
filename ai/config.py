"""Search, board and arena settings loaded from a JSON payload."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Optional

from ai.minimax import DEPTH, Algorithm
from engine.rules import BOARD_COLS, BOARD_ROWS, CONNECT_LENGTH, MIN_LINE_LENGTH

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[1] / "configs" / "default.json"


class SearchConfig:
    """Container for settings loaded from a config file."""

    def __init__(self, payload: Optional[Dict[str, object]] = None) -> None:
        payload = payload or {}
        self.depth = int(payload.get("depth", DEPTH))
        self.algorithm = Algorithm(payload.get("algorithm", Algorithm.ALPHA_BETA.value))
        seed = payload.get("seed")
        self.seed = None if seed is None else int(seed)

        board = self._section(payload, "board")
        self.rows = int(board.get("rows", BOARD_ROWS))
        self.cols = int(board.get("cols", BOARD_COLS))
        self.connect = int(board.get("connect", CONNECT_LENGTH))

        arena = self._section(payload, "arena")
        self.games = int(arena.get("games", 10))
        self.parallel_workers = int(arena.get("parallel_workers", 1))
        base_seed = arena.get("base_seed")
        self.base_seed = None if base_seed is None else int(base_seed)
        self.opening_plies = int(arena.get("opening_plies", 2))
        self.log_every = int(arena.get("log_every", 5))

        self._validate()

    @staticmethod
    def _section(payload: Dict[str, object], key: str) -> Dict[str, object]:
        section = payload.get(key) or {}
        if not isinstance(section, dict):
            raise ValueError(f"Config section '{key}' must be an object, got {type(section).__name__}")
        return section

    def _validate(self) -> None:
        if self.depth < 0:
            raise ValueError(f"depth must be non-negative, got {self.depth}")
        if self.rows < 1 or self.cols < 1:
            raise ValueError(f"board must have at least one cell, got {self.rows}x{self.cols}")
        if self.connect < MIN_LINE_LENGTH:
            raise ValueError(f"connect must be at least {MIN_LINE_LENGTH}, got {self.connect}")
        if self.games < 1:
            raise ValueError(f"arena games must be positive, got {self.games}")

    @classmethod
    def from_json(cls, path: str | Path) -> "SearchConfig":
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls(payload)

    @classmethod
    def load(cls, path: Optional[str | Path] = None) -> "SearchConfig":
        """Load `path`, or the bundled defaults when no path is given."""
        if path is not None:
            return cls.from_json(path)
        if DEFAULT_CONFIG_PATH.exists():
            return cls.from_json(DEFAULT_CONFIG_PATH)
        return cls()
