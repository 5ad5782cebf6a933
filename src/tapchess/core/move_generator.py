"""Destination generation per piece kind."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tapchess.core.enums import PieceKind, Side
from tapchess.core.types import Square, in_bounds

if TYPE_CHECKING:
    from tapchess.core.position import Position


# Offsets are (df, dr). Tuple order is generation order.

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (2, 1),
    (-2, 1),
    (2, -1),
    (-2, -1),
    (1, 2),
    (-1, 2),
    (1, -2),
    (-1, -2),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
    (0, -1),
    (1, -1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (-1, 1), (1, -1), (-1, -1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_SLIDING_DIRS: dict[PieceKind, tuple[tuple[int, int], ...]] = {
    PieceKind.BISHOP: BISHOP_DIRS,
    PieceKind.ROOK: ROOK_DIRS,
    PieceKind.QUEEN: QUEEN_DIRS,
}

_STEP_OFFSETS: dict[PieceKind, tuple[tuple[int, int], ...]] = {
    PieceKind.KNIGHT: KNIGHT_OFFSETS,
    PieceKind.KING: KING_OFFSETS,
}


class MoveGenerator:
    """Generates destination squares for pieces in a :class:`Position`.

    Read-only: the position is never mutated. There is no check detection,
    so every destination returned here is playable.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def legal_destinations(self, from_sq: Square) -> list[Square]:
        """Squares the piece on *from_sq* may move to, in generation order.

        Empty for an empty or off-board *from_sq*.
        """
        if not in_bounds(from_sq):
            return []
        piece = self._board[from_sq]
        if piece is None:
            return []

        out: list[Square] = []
        if piece.kind == PieceKind.PAWN:
            self._gen_pawn(from_sq, piece.side, out)
        elif piece.kind in _STEP_OFFSETS:
            self._gen_steps(from_sq, piece.side, _STEP_OFFSETS[piece.kind], out)
        else:
            for direction in _SLIDING_DIRS[piece.kind]:
                self._walk_ray(from_sq, piece.side, direction, out)
        return out

    def can_occupy(self, sq: Square, mover: Side, allow_capture: bool) -> bool:
        """Whether a piece of *mover* may stand on *sq*.

        Off-board squares and own pieces never qualify; an opposing piece
        qualifies only when *allow_capture* is set.
        """
        if not in_bounds(sq):
            return False
        target = self._board[sq]
        if target is None:
            return True
        return target.side != mover and allow_capture

    def try_add(
        self, sq: Square, mover: Side, allow_capture: bool, out: list[Square]
    ) -> bool:
        """Append *sq* to *out* if :meth:`can_occupy`; return whether it was."""
        if self.can_occupy(sq, mover, allow_capture):
            out.append(sq)
            return True
        return False

    def is_blocker(self, sq: Square) -> bool:
        """Whether *sq* stops a ray: off the board or occupied."""
        return not in_bounds(sq) or self._board[sq] is not None

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, side: Side, out: list[Square]) -> None:
        fwd = side.forward
        one_step = sq.offset(0, fwd)
        stepped = self.try_add(one_step, side, False, out)

        if sq.rank == side.pawn_rank:
            if stepped or not self._pos.options.pawn_double_step_needs_clear_path:
                self.try_add(sq.offset(0, 2 * fwd), side, False, out)

        for df in (1, -1):
            cap_sq = sq.offset(df, fwd)
            if not in_bounds(cap_sq):
                continue
            target = self._board[cap_sq]
            if target is not None and target.side != side:
                out.append(cap_sq)

    def _gen_steps(
        self,
        sq: Square,
        side: Side,
        offsets: tuple[tuple[int, int], ...],
        out: list[Square],
    ) -> None:
        for df, dr in offsets:
            self.try_add(sq.offset(df, dr), side, True, out)

    def _walk_ray(
        self,
        sq: Square,
        side: Side,
        direction: tuple[int, int],
        out: list[Square],
    ) -> None:
        df, dr = direction
        to_sq = sq.offset(df, dr)
        while in_bounds(to_sq):
            self.try_add(to_sq, side, True, out)
            if self.is_blocker(to_sq):
                break
            to_sq = to_sq.offset(df, dr)


def legal_destinations(position: Position, from_sq: Square) -> list[Square]:
    """Shortcut for ``MoveGenerator(position).legal_destinations(from_sq)``."""
    return MoveGenerator(position).legal_destinations(from_sq)
