"""
connectfour.game - Core game mechanics for Connect Four

This package contains the board state machine, the win detector and the
values they exchange with callers.
"""

from connectfour.game.board import FULL, GameBoard
from connectfour.game.models import DropResult, GameState, Move, Player, default_players
from connectfour.game.win import completes_line, is_board_full, winning_line

__all__ = [
    'FULL', 'GameBoard',
    'DropResult', 'GameState', 'Move', 'Player', 'default_players',
    'completes_line', 'is_board_full', 'winning_line',
]
