"""Player marks for connect-style games."""

from __future__ import annotations

from enum import Enum
from typing import Dict


class Mark(str, Enum):
    """Player mark. X always moves first."""

    X = "x"
    O = "o"

    def opponent(self) -> "Mark":
        return Mark.O if self is Mark.X else Mark.X

    @property
    def code(self) -> int:
        return MARK_CODES[self]


EMPTY_CODE = 0

MARK_CODES: Dict[Mark, int] = {
    Mark.X: 1,
    Mark.O: 2,
}

CODE_MARKS: Dict[int, Mark] = {code: mark for mark, code in MARK_CODES.items()}

EMPTY_SYMBOLS = frozenset({".", "_", "-"})


def parse_mark(symbol: str) -> Mark:
    """Return the mark for a single board character."""
    try:
        return Mark(symbol.lower())
    except ValueError:
        raise ValueError(f"Unknown mark symbol: {symbol!r}") from None
