"""Agent interface shared by the arena and the terminal game."""

from __future__ import annotations

from abc import ABC, abstractmethod

from engine.board import Board


class BaseAI(ABC):
    """Picks a column for whichever mark is due to move."""

    name: str = "agent"

    @abstractmethod
    def choose_move(self, board: Board) -> int:
        """Return a legal column; raise RuntimeError when the game is already over."""
        raise NotImplementedError

    def describe(self) -> str:
        return self.name
