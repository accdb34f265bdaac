from __future__ import annotations

import pytest

from engine.marks import Mark
from game_trees import TreeState, leaf


@pytest.fixture
def textbook_tree() -> TreeState:
    """Max root over three min nodes; alpha-beta skips part of the second and third."""
    return TreeState(
        Mark.X,
        children=[
            TreeState(Mark.O, children=[leaf(3), leaf(12), leaf(8)], label="a"),
            TreeState(Mark.O, children=[leaf(2), leaf(4), leaf(6)], label="b"),
            TreeState(Mark.O, children=[leaf(14), leaf(5), leaf(2)], label="c"),
        ],
        label="root",
    )
