"""Exception hierarchy for the chess core."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tapchess.core.enums import Side
    from tapchess.core.types import Square


class ChessError(Exception):
    """Base class for every error raised by tapchess."""


class SquareOutOfRange(ChessError, IndexError):
    """A board access addressed a square outside the grid."""

    def __init__(self, square: Square) -> None:
        super().__init__(f"Square {tuple(square)} is off the board")
        self.square = square


class MoveError(ChessError):
    """A move or selection was rejected."""


class EmptySourceSelection(MoveError):
    def __init__(self, square: Square) -> None:
        super().__init__(f"No piece on {square}")
        self.square = square


class IllegalDestination(MoveError):
    def __init__(self, from_sq: Square, to_sq: Square) -> None:
        super().__init__(f"{from_sq} cannot move to {to_sq}")
        self.from_sq = from_sq
        self.to_sq = to_sq


class NotYourTurn(MoveError):
    def __init__(self, square: Square, side_to_move: Side) -> None:
        super().__init__(f"Piece on {square} does not belong to {side_to_move}")
        self.square = square
        self.side_to_move = side_to_move
