"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from tapchess.core import Position, MoveGenerator, Rules, parse_square

    pos = Position.initial()
    gen = MoveGenerator(pos)
    print(gen.legal_destinations(parse_square("e7")))
    Rules.apply_move(pos, parse_square("e7"), parse_square("e5"))
"""

from tapchess.core.board import Board
from tapchess.core.enums import PieceKind, Side
from tapchess.core.errors import (
    ChessError,
    EmptySourceSelection,
    IllegalDestination,
    MoveError,
    NotYourTurn,
    SquareOutOfRange,
)
from tapchess.core.move_generator import MoveGenerator, legal_destinations
from tapchess.core.options import RuleOptions
from tapchess.core.piece import Occupant, Piece
from tapchess.core.position import Position
from tapchess.core.rules import Rules
from tapchess.core.types import (
    BOARD_SIZE,
    Square,
    all_squares,
    in_bounds,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "PieceKind",
    "Side",
    # Types / helpers
    "BOARD_SIZE",
    "Square",
    "all_squares",
    "in_bounds",
    "parse_square",
    "square_name",
    # Errors
    "ChessError",
    "EmptySourceSelection",
    "IllegalDestination",
    "MoveError",
    "NotYourTurn",
    "SquareOutOfRange",
    # Domain objects
    "Board",
    "MoveGenerator",
    "Occupant",
    "Piece",
    "Position",
    "RuleOptions",
    "Rules",
    "legal_destinations",
]
