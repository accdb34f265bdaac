"""Immutable gravity connect board, successor generation, and line features."""

from __future__ import annotations

from collections import Counter
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from engine.marks import CODE_MARKS, EMPTY_CODE, EMPTY_SYMBOLS, MARK_CODES, Mark, parse_mark
from engine.rules import (
    BOARD_COLS,
    BOARD_ROWS,
    CONNECT_LENGTH,
    MIN_LINE_LENGTH,
    drop_row,
    line_run_counts,
)

RENDER_SYMBOLS: Dict[int, str] = {
    EMPTY_CODE: ".",
    MARK_CODES[Mark.X]: "x",
    MARK_CODES[Mark.O]: "o",
}


class Board:
    """
    Connect board position.

    Row 0 is the top row; marks fall to the lowest empty row of a column.
    A Board never changes after construction: `play` and `successors`
    return new boards.
    """

    def __init__(
        self,
        grid: np.ndarray,
        next_mover: Mark = Mark.X,
        connect: int = CONNECT_LENGTH,
    ) -> None:
        if grid.ndim != 2:
            raise ValueError(f"Board grid must be 2-D, got shape {grid.shape}")
        if connect < MIN_LINE_LENGTH:
            raise ValueError(f"Connect length must be at least {MIN_LINE_LENGTH}")
        self.grid = np.array(grid, dtype=np.int8, copy=True)
        self.grid.flags.writeable = False
        self.next_mover = next_mover
        self.connect = connect
        self._run_counts: Dict[Mark, Counter] = {}

    @classmethod
    def new(
        cls,
        rows: int = BOARD_ROWS,
        cols: int = BOARD_COLS,
        connect: int = CONNECT_LENGTH,
        first: Mark = Mark.X,
    ) -> "Board":
        """Empty board with `first` to move."""
        return cls(np.zeros((rows, cols), dtype=np.int8), next_mover=first, connect=connect)

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[str],
        next_mover: Optional[Mark] = None,
        connect: int = CONNECT_LENGTH,
    ) -> "Board":
        """
        Build a board from text rows, top row first.

        Cells are `x`, `o`, or one of `.`, `_`, `-` for empty; whitespace is
        ignored. When `next_mover` is omitted it is inferred from the mark
        counts, X moving first.
        """
        parsed: List[List[int]] = []
        for text in rows:
            cells = [ch for ch in text if not ch.isspace()]
            parsed.append([EMPTY_CODE if ch in EMPTY_SYMBOLS else parse_mark(ch).code for ch in cells])
        if not parsed or not parsed[0]:
            raise ValueError("Board needs at least one non-empty row")
        width = len(parsed[0])
        if any(len(row) != width for row in parsed):
            raise ValueError("All board rows must have the same width")

        grid = np.array(parsed, dtype=np.int8)
        if next_mover is None:
            x_count = int(np.count_nonzero(grid == Mark.X.code))
            o_count = int(np.count_nonzero(grid == Mark.O.code))
            next_mover = Mark.X if x_count <= o_count else Mark.O
        return cls(grid, next_mover=next_mover, connect=connect)

    @property
    def rows(self) -> int:
        return int(self.grid.shape[0])

    @property
    def cols(self) -> int:
        return int(self.grid.shape[1])

    @property
    def ply_count(self) -> int:
        return int(np.count_nonzero(self.grid))

    def get_cell(self, row: int, col: int) -> Optional[Mark]:
        """Return the mark at a cell, or None when empty."""
        return CODE_MARKS.get(int(self.grid[row, col]))

    def legal_moves(self) -> List[int]:
        """Playable columns in ascending order; empty once the game is over."""
        if self.winner() is not None:
            return []
        return [col for col in range(self.cols) if self.grid[0, col] == EMPTY_CODE]

    def play(self, col: int) -> "Board":
        """Return the board after the next mover drops a mark in `col`."""
        if col not in self.legal_moves():
            raise ValueError(f"Illegal move: column {col}")
        row = drop_row(self.grid, col, EMPTY_CODE)
        grid = self.grid.copy()
        grid[row, col] = self.next_mover.code
        return Board(grid, next_mover=self.next_mover.opponent(), connect=self.connect)

    def successors(self) -> List["Board"]:
        """Boards reachable by one legal move, in column order."""
        return [self.play(col) for col in self.legal_moves()]

    def _line_runs(self, mark: Mark) -> Counter:
        if mark not in self._run_counts:
            self._run_counts[mark] = line_run_counts(self.grid, mark.code)
        return self._run_counts[mark]

    def num_lines(self, length: int, mark: Mark) -> int:
        """Number of maximal runs of exactly `length` marks, over all four directions."""
        if length < MIN_LINE_LENGTH:
            raise ValueError(f"Line length must be at least {MIN_LINE_LENGTH}, got {length}")
        return self._line_runs(mark)[length]

    def longest_line(self, mark: Mark) -> int:
        runs = self._line_runs(mark)
        if runs:
            return max(runs)
        return 1 if np.any(self.grid == mark.code) else 0

    def winner(self) -> Optional[Mark]:
        """Return the mark holding a line of at least `connect`, if any."""
        for mark in (Mark.X, Mark.O):
            if self.longest_line(mark) >= self.connect:
                return mark
        return None

    def is_full(self) -> bool:
        return not np.any(self.grid == EMPTY_CODE)

    def game_over(self) -> Tuple[bool, Optional[Mark], bool]:
        """Return (is_terminal, winner, is_draw)."""
        winner = self.winner()
        if winner is not None:
            return True, winner, False
        if self.is_full():
            return True, None, True
        return False, None, False

    def render_ascii(self) -> str:
        """Return a simple human-readable board representation."""
        lines: List[str] = [" ".join(RENDER_SYMBOLS[int(code)] for code in row) for row in self.grid]
        lines.append(" ".join(str(col) for col in range(self.cols)))
        return "\n".join(lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.next_mover is other.next_mover
            and self.connect == other.connect
            and np.array_equal(self.grid, other.grid)
        )

    def __hash__(self) -> int:
        return hash((self.next_mover.value, self.connect, self.grid.shape, self.grid.tobytes()))

    def __repr__(self) -> str:
        return f"Board(next_mover={self.next_mover.value}, ply={self.ply_count}, shape={self.grid.shape})"
