"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Side(IntEnum):
    """Side colour. LIGHT starts on ranks 0-1, DARK on ranks 6-7."""

    LIGHT = 0
    DARK = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    @property
    def forward(self) -> int:
        """Rank direction this side's pawns advance in."""
        return 1 if self == Side.LIGHT else -1

    @property
    def pawn_rank(self) -> int:
        """Rank the side's pawns start on."""
        return 1 if self == Side.LIGHT else 6

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6
