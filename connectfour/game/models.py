"""
models.py - Immutable values exchanged between the board and its callers
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from connectfour.utils import GameStatus, Mark


@dataclass(frozen=True)
class Player:
    """
    A participant in a game.

    The mark is the identity written into the grid; name and color are
    presentation attributes the board carries but never interprets.
    """
    mark: Mark
    name: str
    color: Optional[str] = None

    def __str__(self):
        return self.name


def default_players() -> Tuple[Player, Player]:
    return Player(Mark.ONE, "Player 1"), Player(Mark.TWO, "Player 2")


@dataclass(frozen=True)
class Move:
    """Where a piece settled."""
    column: int
    row: int
    mark: Mark


@dataclass(frozen=True)
class GameState:
    status: GameStatus
    winner: Optional[Player] = None

    @classmethod
    def in_progress(cls) -> "GameState":
        return cls(GameStatus.IN_PROGRESS)

    @classmethod
    def won(cls, player: Player) -> "GameState":
        return cls(GameStatus.WON, player)

    @classmethod
    def draw(cls) -> "GameState":
        return cls(GameStatus.DRAW)

    def is_terminal(self) -> bool:
        return self.status.is_terminal()

    def __str__(self):
        if self.status is GameStatus.WON:
            return f"{self.winner} won"
        if self.status is GameStatus.DRAW:
            return "draw"
        return "in progress"


@dataclass(frozen=True)
class DropResult:
    """
    Outcome of GameBoard.drop_piece.

    A rejected drop (full column) carries no move and the unchanged state.
    """
    accepted: bool
    state: GameState
    move: Optional[Move] = None

    @property
    def column(self) -> Optional[int]:
        return self.move.column if self.move else None

    @property
    def row(self) -> Optional[int]:
        return self.move.row if self.move else None
