"""
utils.py - Constants, enumerations and helpers for the Connect Four engine

Shared by the board, the win detector and the callers that present a game.
"""

from enum import Enum, auto
from typing import Dict, Optional, Sequence, Tuple

import numpy as np

# Board defaults
DEFAULT_WIDTH = 7
DEFAULT_HEIGHT = 6
DEFAULT_VICTORY_CONDITION = 4  # pieces in a row needed to win
MIN_VICTORY_CONDITION = 2

GRID_DTYPE = np.int8


class Mark(Enum):
    """State of a single grid cell, doubling as player identity."""
    EMPTY = 0
    ONE = 1    # moves first
    TWO = 2

    def other(self) -> "Mark":
        if self is Mark.ONE:
            return Mark.TWO
        if self is Mark.TWO:
            return Mark.ONE
        return Mark.EMPTY

    def __str__(self):
        return SYMBOLS[self]


SYMBOLS = {
    Mark.EMPTY: ".",
    Mark.ONE: "X",
    Mark.TWO: "O",
}


class GameStatus(Enum):
    IN_PROGRESS = auto()
    WON = auto()
    DRAW = auto()

    def is_terminal(self) -> bool:
        return self is not GameStatus.IN_PROGRESS


class Axis(Enum):
    """The four lines a run can lie on."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_UP_RIGHT = auto()  # bottom-left to top-right
    DIAGONAL_UP_LEFT = auto()   # bottom-right to top-left


# Unit vectors as (d_column, d_row), row growing upward
AXIS_VECTORS: Dict[Axis, Tuple[int, int]] = {
    Axis.HORIZONTAL: (1, 0),
    Axis.VERTICAL: (0, 1),
    Axis.DIAGONAL_UP_RIGHT: (1, 1),
    Axis.DIAGONAL_UP_LEFT: (-1, 1),
}


def new_grid(width: int, height: int) -> np.ndarray:
    """An all-empty grid addressed grid[row, column], row 0 at the bottom."""
    return np.full((height, width), Mark.EMPTY.value, dtype=GRID_DTYPE)


def render_grid_ascii(grid: np.ndarray,
                      highlight: Optional[Sequence[Tuple[int, int]]] = None) -> str:
    """
    Render a grid as ASCII art, top row first.

    Args:
        grid: The game grid
        highlight: (column, row) cells drawn in lower case

    Returns:
        Multi-line string with column numbers underneath
    """
    height, width = grid.shape
    marked = set(highlight or ())
    border = "+" + "-" * (width * 2 + 1) + "+"

    lines = [border]
    for row in range(height - 1, -1, -1):
        cells = []
        for column in range(width):
            symbol = SYMBOLS[Mark(int(grid[row, column]))]
            if (column, row) in marked:
                symbol = symbol.lower() if symbol.isalpha() else symbol
            cells.append(symbol)
        lines.append("| " + " ".join(cells) + " |")
    lines.append(border)

    # only the last digit fits under each cell on wide boards
    lines.append("  " + " ".join(str(column % 10) for column in range(width)))
    return "\n".join(lines)
