"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from tapchess.core.enums import PieceKind, Side
from tapchess.core.errors import SquareOutOfRange
from tapchess.core.piece import Occupant, Piece
from tapchess.core.types import BOARD_SIZE, Square, in_bounds

_BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


class Board:
    """Mutable 8x8 grid of occupants, stored ``[rank][file]``.

    Every access is bounds-checked and raises :class:`SquareOutOfRange`
    for squares off the grid.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Occupant]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    @staticmethod
    def _check(sq: Square) -> None:
        if not in_bounds(sq):
            raise SquareOutOfRange(sq)

    # -- Element access -----------------------------------------------------

    def occupant_at(self, sq: Square) -> Occupant:
        self._check(sq)
        return self._grid[sq.rank][sq.file]

    def set(self, sq: Square, occupant: Occupant) -> None:
        self._check(sq)
        self._grid[sq.rank][sq.file] = occupant

    def __getitem__(self, sq: Square) -> Occupant:
        return self.occupant_at(sq)

    def __setitem__(self, sq: Square, occupant: Occupant) -> None:
        self.set(sq, occupant)

    def is_empty(self, sq: Square) -> bool:
        return self.occupant_at(sq) is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, side: Side) -> list[Square]:
        """Squares occupied by *side*, rank by rank."""
        return [
            Square(f, r)
            for r, row in enumerate(self._grid)
            for f, piece in enumerate(row)
            if piece is not None and piece.side == side
        ]

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        return b

    def clear(self) -> None:
        self._grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def standard_setup(cls) -> Board:
        """Standard starting position (light on ranks 0-1, dark on 6-7)."""
        b = cls()
        for f, kind in enumerate(_BACK_RANK):
            b[Square(f, 0)] = Piece(Side.LIGHT, kind)
            b[Square(f, 1)] = Piece(Side.LIGHT, PieceKind.PAWN)
            b[Square(f, 6)] = Piece(Side.DARK, PieceKind.PAWN)
            b[Square(f, 7)] = Piece(Side.DARK, kind)
        return b

    @classmethod
    def from_placement(cls, placement: dict[Square, Piece]) -> Board:
        """Board holding only the given pieces."""
        b = cls()
        for sq, piece in placement.items():
            b[sq] = piece
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(BOARD_SIZE - 1, -1, -1):
            row = [str(p) if p else "." for p in self._grid[rank]]
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
