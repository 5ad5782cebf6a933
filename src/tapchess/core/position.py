"""Position - board placement plus the side to move."""

from __future__ import annotations

from tapchess.core.board import Board
from tapchess.core.enums import Side
from tapchess.core.options import RuleOptions
from tapchess.core.piece import Occupant
from tapchess.core.types import Square


class Position:
    """Board and turn state.

    The turn is a two-state machine (light/dark to move) whose only
    transition, :meth:`pass_turn`, fires once per applied move.
    """

    __slots__ = ("board", "side_to_move", "options")

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Side | None = None,
        options: RuleOptions | None = None,
    ) -> None:
        self.options = options or RuleOptions()
        self.board = board if board is not None else Board()
        self.side_to_move = (
            side_to_move if side_to_move is not None else self.options.first_to_move
        )

    @classmethod
    def initial(cls, options: RuleOptions | None = None) -> Position:
        """Standard setup with ``options.first_to_move`` on move."""
        return cls(Board.standard_setup(), options=options)

    # -- Turn ---------------------------------------------------------------

    def pass_turn(self) -> Side:
        """Hand the move to the other side and return it."""
        self.side_to_move = self.side_to_move.opposite
        return self.side_to_move

    # -- Helpers ------------------------------------------------------------

    def occupant_at(self, sq: Square) -> Occupant:
        return self.board.occupant_at(sq)

    def copy(self) -> Position:
        return Position(self.board.copy(), self.side_to_move, self.options)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.board == other.board
            and self.side_to_move == other.side_to_move
            and self.options == other.options
        )

    def __repr__(self) -> str:
        return f"{self.board!r}\n{self.side_to_move} to move"
