from __future__ import annotations

import pytest

from ai.heuristic import LINE_LENGTHS, LINE_WEIGHT_BASE, advantage, heuristic
from engine.board import Board
from engine.marks import Mark
from game_trees import TreeState, random_board


def test_weights_by_line_length():
    state = TreeState(Mark.X, lines={(2, Mark.X): 3, (3, Mark.X): 2, (4, Mark.X): 1, (5, Mark.X): 7})
    assert LINE_LENGTHS == (2, 3, 4)
    assert advantage(state, Mark.X) == 3 * 100**2 + 2 * 100**3 + 100**4
    assert advantage(state, Mark.O) == 0


def test_heuristic_is_difference_of_advantages():
    state = TreeState(Mark.O, lines={(3, Mark.X): 1, (2, Mark.O): 4})
    assert heuristic(state, Mark.X) == 100**3 - 4 * 100**2
    assert heuristic(state, Mark.O) == 4 * 100**2 - 100**3


def test_longer_lines_dominate_shorter_ones():
    # A board-sized pile of short lines still loses to a single longer line.
    short = TreeState(Mark.X, lines={(2, Mark.X): 69, (3, Mark.X): 69})
    long = TreeState(Mark.X, lines={(4, Mark.X): 1})
    assert heuristic(long, Mark.X) > heuristic(short, Mark.X)
    assert LINE_WEIGHT_BASE**4 > 69 * (LINE_WEIGHT_BASE**2 + LINE_WEIGHT_BASE**3)


def test_board_two_line():
    board = Board.from_rows(["......", "xx...."], next_mover=Mark.O)
    assert heuristic(board, Mark.X) == 100**2
    assert heuristic(board, Mark.O) == -(100**2)


@pytest.mark.parametrize("seed", range(15))
def test_evaluation_is_antisymmetric(seed: int):
    board = random_board(seed, plies=seed * 2)
    assert heuristic(board, Mark.X) == -heuristic(board, Mark.O)


def test_empty_board_scores_zero():
    assert heuristic(Board.new(), Mark.X) == 0
    assert heuristic(Board.new(), Mark.O) == 0


def test_scores_are_exact_integers():
    board = Board.from_rows(
        [
            ".......",
            ".......",
            ".......",
            ".......",
            "o.o.o..",
            "xxxx...",
        ]
    )
    score = heuristic(board, Mark.X)
    assert isinstance(score, int)
    assert score == 100_000_000
