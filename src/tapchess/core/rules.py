"""Move application and selection rules."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tapchess.core.errors import (
    EmptySourceSelection,
    IllegalDestination,
    MoveError,
    NotYourTurn,
)
from tapchess.core.move_generator import MoveGenerator
from tapchess.core.types import in_bounds

if TYPE_CHECKING:
    from tapchess.core.piece import Piece
    from tapchess.core.position import Position
    from tapchess.core.types import Square

_LOGGER = logging.getLogger(__name__)


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    # Known gaps, kept on purpose: no check, castling, en passant,
    # promotion or game over. Kings can be captured.

    @staticmethod
    def is_selectable(position: Position, sq: Square) -> bool:
        """Whether *sq* holds a piece of the side to move."""
        if not in_bounds(sq):
            return False
        piece = position.board[sq]
        return piece is not None and piece.side == position.side_to_move

    @staticmethod
    def check_selection(position: Position, sq: Square) -> Piece:
        """Return the piece on *sq* or raise if it cannot be picked up."""
        piece = position.board[sq] if in_bounds(sq) else None
        if piece is None:
            raise EmptySourceSelection(sq)
        if piece.side != position.side_to_move:
            raise NotYourTurn(sq, position.side_to_move)
        return piece

    @staticmethod
    def check_move(position: Position, from_sq: Square, to_sq: Square) -> Piece:
        """Return the moving piece or raise why *from_sq* → *to_sq* is illegal.

        The side to move is not consulted; selection enforces turn order.
        """
        piece = position.board[from_sq] if in_bounds(from_sq) else None
        if piece is None:
            raise EmptySourceSelection(from_sq)
        if to_sq not in MoveGenerator(position).legal_destinations(from_sq):
            raise IllegalDestination(from_sq, to_sq)
        return piece

    @staticmethod
    def play_move(position: Position, from_sq: Square, to_sq: Square) -> Piece:
        """Apply a move or raise :class:`MoveError`.

        On success the piece lands on *to_sq* (capturing whatever stood
        there), *from_sq* is emptied and the turn passes.
        """
        piece = Rules.check_move(position, from_sq, to_sq)
        board = position.board
        captured = board[to_sq]
        board[to_sq] = piece
        board[from_sq] = None
        side = position.pass_turn()
        if captured is not None:
            _LOGGER.info("%s %s x %s on %s", piece, from_sq, captured, to_sq)
        else:
            _LOGGER.info("%s %s - %s", piece, from_sq, to_sq)
        _LOGGER.debug("%s to move", side)
        return piece

    @staticmethod
    def apply_move(position: Position, from_sq: Square, to_sq: Square) -> bool:
        """Apply a move if legal. Returns False, changing nothing, otherwise."""
        try:
            Rules.play_move(position, from_sq, to_sq)
        except MoveError as exc:
            _LOGGER.debug("Move rejected: %s", exc)
            return False
        return True
