"""
win.py - Win and draw detection for Connect Four

Pure functions over a grid addressed grid[row, column] with row 0 at the
bottom. Win checks start from the cell a piece just landed in and walk
outward along each axis, so each call costs O(victory_condition) per axis
regardless of the board size.
"""

from typing import Iterator, List, Optional, Tuple

import numpy as np

from connectfour.utils import AXIS_VECTORS, Mark

Coord = Tuple[int, int]  # (column, row)


def in_bounds(grid: np.ndarray, column: int, row: int) -> bool:
    height, width = grid.shape
    return 0 <= column < width and 0 <= row < height


def _walk(grid: np.ndarray, column: int, row: int, mark: Mark,
          d_column: int, d_row: int, limit: Optional[int] = None) -> Iterator[Coord]:
    """Yield same-mark cells stepping away from (column, row), exclusive."""
    steps = 0
    c, r = column + d_column, row + d_row
    while (limit is None or steps < limit) and in_bounds(grid, c, r) and grid[r, c] == mark.value:
        yield c, r
        steps += 1
        c += d_column
        r += d_row


def completes_line(grid: np.ndarray, column: int, row: int, mark: Mark,
                   victory_condition: int) -> bool:
    """
    Check whether the piece at (column, row) completes a winning run.

    Args:
        grid: The game grid
        column: Landing column
        row: Landing row
        mark: Owner of the landing cell
        victory_condition: Run length needed to win

    Returns:
        True if any axis through the landing cell holds a run of at least
        victory_condition pieces of this mark
    """
    if mark is Mark.EMPTY:
        return False

    # nothing past victory_condition - 1 steps can change the answer
    limit = victory_condition - 1
    for d_column, d_row in AXIS_VECTORS.values():
        count = 1  # the landing cell
        count += sum(1 for _ in _walk(grid, column, row, mark, d_column, d_row, limit))
        count += sum(1 for _ in _walk(grid, column, row, mark, -d_column, -d_row, limit))
        if count >= victory_condition:
            return True

    return False


def winning_line(grid: np.ndarray, column: int, row: int, mark: Mark,
                 victory_condition: int) -> List[Coord]:
    """
    Get the full run through (column, row) on the first qualifying axis.

    Returns:
        (column, row) cells ordered along the axis, or an empty list
    """
    if mark is Mark.EMPTY:
        return []

    for d_column, d_row in AXIS_VECTORS.values():
        backward = list(_walk(grid, column, row, mark, -d_column, -d_row))
        forward = list(_walk(grid, column, row, mark, d_column, d_row))
        if len(backward) + 1 + len(forward) >= victory_condition:
            return backward[::-1] + [(column, row)] + forward

    return []


def is_board_full(grid: np.ndarray) -> bool:
    """True iff the top cell of every column is occupied."""
    return bool(np.all(grid[-1, :] != Mark.EMPTY.value))
