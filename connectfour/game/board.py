"""
board.py - Board state machine for Connect Four

This module implements GameBoard, the only owner and mutator of the grid. It
validates and applies drops, alternates turns and derives the game state after
every move using the pure checks in connectfour.game.win.
"""

from typing import List, Optional, Sequence, Tuple

import numpy as np

from connectfour.debug import debug
from connectfour.errors import ConfigurationError, InvalidStateError, OutOfRangeError
from connectfour.game.models import DropResult, GameState, Move, Player, default_players
from connectfour.game.win import Coord, completes_line, is_board_full, winning_line
from connectfour.utils import (DEFAULT_HEIGHT, DEFAULT_VICTORY_CONDITION, DEFAULT_WIDTH,
                               MIN_VICTORY_CONDITION, Mark, new_grid, render_grid_ascii)

# Returned by column_top_row for a column with no room left
FULL = None


def _require_int(name: str, value, minimum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise ConfigurationError(f"{name} must be >= {minimum}, got {value}")
    return int(value)


class GameBoard:
    """
    A Connect Four game: the grid, whose turn it is and how it ended.

    Coordinates are (column, row) with row 0 at the bottom. Once the game is
    won or drawn the grid is frozen until reset().
    """

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT,
                 victory_condition: int = DEFAULT_VICTORY_CONDITION,
                 players: Optional[Sequence[Player]] = None):
        """
        Create an empty board.

        Args:
            width: Number of columns (>= 1)
            height: Number of rows (>= 1)
            victory_condition: Run length needed to win (>= 2)
            players: (first, second) players; their marks must be ONE and TWO

        Raises:
            ConfigurationError: If any argument is out of its domain
        """
        self.width = _require_int("width", width, 1)
        self.height = _require_int("height", height, 1)
        self.victory_condition = _require_int("victory_condition", victory_condition,
                                              MIN_VICTORY_CONDITION)
        self.players = self._check_players(players)

        debug.debug(f"Initializing {self.width}x{self.height} board, "
                    f"connect {self.victory_condition}", "board")
        self.reset()

    @staticmethod
    def _check_players(players: Optional[Sequence[Player]]) -> Tuple[Player, Player]:
        if players is None:
            return default_players()
        players = tuple(players)
        if len(players) != 2:
            raise ConfigurationError(f"Expected exactly two players, got {len(players)}")
        if players[0].mark is not Mark.ONE or players[1].mark is not Mark.TWO:
            raise ConfigurationError("Players must carry marks ONE and TWO, in that order")
        return players

    def reset(self) -> None:
        """Discard all pieces and start over with the same parameters."""
        debug.debug("Resetting board", "board")
        self.grid = new_grid(self.width, self.height)
        self._current_player = self.players[0]
        self._state = GameState.in_progress()
        self._last_move: Optional[Move] = None
        self._move_count = 0

    @property
    def current_player(self) -> Player:
        return self._current_player

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def last_move(self) -> Optional[Move]:
        return self._last_move

    @property
    def move_count(self) -> int:
        return self._move_count

    def is_terminal(self) -> bool:
        return self._state.is_terminal()

    def player_for(self, mark: Mark) -> Optional[Player]:
        for player in self.players:
            if player.mark is mark:
                return player
        return None

    def _check_column(self, column: int) -> int:
        if not 0 <= column < self.width:
            raise OutOfRangeError("column", column, self.width)
        return column

    def cell_at(self, column: int, row: int) -> Mark:
        self._check_column(column)
        if not 0 <= row < self.height:
            raise OutOfRangeError("row", row, self.height)
        return Mark(int(self.grid[row, column]))

    def column_top_row(self, column: int) -> Optional[int]:
        """
        Get the row the next piece dropped into a column would land in.

        Returns:
            The lowest empty row, or FULL (None) if the column has no room
        """
        self._check_column(column)
        empty_rows = np.flatnonzero(self.grid[:, column] == Mark.EMPTY.value)
        if empty_rows.size == 0:
            return FULL
        return int(empty_rows[0])

    def valid_columns(self) -> List[int]:
        """Columns that would accept a drop right now."""
        if self.is_terminal():
            return []
        return [column for column in range(self.width) if self.column_top_row(column) is not FULL]

    def drop_piece(self, column: int) -> DropResult:
        """
        Drop the current player's piece into a column.

        Args:
            column: Target column (0-indexed)

        Returns:
            Accepted result with the landing move and new state, or a
            rejected result if the column is full (nothing changes)

        Raises:
            InvalidStateError: If the game has already been won or drawn
            OutOfRangeError: If the column does not exist
        """
        if self.is_terminal():
            raise InvalidStateError(f"Game is over ({self._state}); call reset() to play again")

        row = self.column_top_row(column)
        if row is FULL:
            debug.debug(f"Rejected drop: column {column} is full", "board")
            return DropResult(accepted=False, state=self._state)

        player = self._current_player
        self.grid[row, column] = player.mark.value
        move = Move(column, row, player.mark)
        self._last_move = move
        self._move_count += 1
        debug.trace(f"{player} placed at ({column}, {row})", "board")

        if completes_line(self.grid, column, row, player.mark, self.victory_condition):
            self._state = GameState.won(player)
            debug.info(f"{player} wins after move at ({column}, {row})", "board")
        elif is_board_full(self.grid):
            self._state = GameState.draw()
            debug.info(f"Game ends in a draw after {self._move_count} moves", "board")
        else:
            self._current_player = self.players[1] if player is self.players[0] else self.players[0]

        return DropResult(accepted=True, state=self._state, move=move)

    def winning_line(self) -> List[Coord]:
        """Cells of the winning run as (column, row), empty unless the game was won."""
        if self._state.winner is None or self._last_move is None:
            return []
        move = self._last_move
        return winning_line(self.grid, move.column, move.row, move.mark, self.victory_condition)

    def get_state(self) -> np.ndarray:
        """A copy of the grid, grid[row, column] with row 0 at the bottom."""
        return self.grid.copy()

    def render(self) -> str:
        return render_grid_ascii(self.grid, highlight=self.winning_line())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (f"GameBoard(width={self.width}, height={self.height}, "
                f"victory_condition={self.victory_condition}, state={self._state.status.name})")
