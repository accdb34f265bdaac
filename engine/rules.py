"""Geometry helpers for gravity connect boards."""

from __future__ import annotations

from collections import Counter
from typing import Iterator, List

import numpy as np

BOARD_ROWS = 6
BOARD_COLS = 7
CONNECT_LENGTH = 4

MIN_LINE_LENGTH = 2


def iter_lines(grid: np.ndarray) -> Iterator[np.ndarray]:
    """
    Yield every straight line of the grid as a 1-D array.

    Covers rows, columns, diagonals and anti-diagonals. Lines shorter than
    two cells cannot hold a run and are skipped.
    """
    rows, cols = grid.shape
    flipped = np.fliplr(grid)
    candidates: List[np.ndarray] = [grid[row, :] for row in range(rows)]
    candidates.extend(grid[:, col] for col in range(cols))
    for offset in range(-(rows - 1), cols):
        candidates.append(np.diagonal(grid, offset=offset))
        candidates.append(np.diagonal(flipped, offset=offset))
    for line in candidates:
        if line.size >= MIN_LINE_LENGTH:
            yield line


def run_lengths(line: np.ndarray, code: int) -> List[int]:
    """Lengths of the maximal runs of `code` along one line."""
    hits = np.concatenate(([0], (line == code).astype(np.int8), [0]))
    edges = np.flatnonzero(np.diff(hits))
    return (edges[1::2] - edges[0::2]).tolist()


def line_run_counts(grid: np.ndarray, code: int) -> Counter:
    """Count maximal same-mark runs of length >= 2 across all four directions."""
    counts: Counter = Counter()
    for line in iter_lines(grid):
        for length in run_lengths(line, code):
            if length >= MIN_LINE_LENGTH:
                counts[length] += 1
    return counts


def drop_row(grid: np.ndarray, col: int, empty_code: int = 0) -> int:
    """Return the lowest empty row in a column, or -1 when the column is full."""
    empties = np.flatnonzero(grid[:, col] == empty_code)
    if empties.size == 0:
        return -1
    return int(empties[-1])
