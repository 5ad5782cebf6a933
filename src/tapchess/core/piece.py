"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from tapchess.core.enums import PieceKind, Side

# FEN character ↔ (Side, PieceKind)
_CHAR_MAP: dict[str, tuple[Side, PieceKind]] = {
    "P": (Side.LIGHT, PieceKind.PAWN),
    "N": (Side.LIGHT, PieceKind.KNIGHT),
    "B": (Side.LIGHT, PieceKind.BISHOP),
    "R": (Side.LIGHT, PieceKind.ROOK),
    "Q": (Side.LIGHT, PieceKind.QUEEN),
    "K": (Side.LIGHT, PieceKind.KING),
    "p": (Side.DARK, PieceKind.PAWN),
    "n": (Side.DARK, PieceKind.KNIGHT),
    "b": (Side.DARK, PieceKind.BISHOP),
    "r": (Side.DARK, PieceKind.ROOK),
    "q": (Side.DARK, PieceKind.QUEEN),
    "k": (Side.DARK, PieceKind.KING),
}

_FEN_CHARS: dict[tuple[Side, PieceKind], str] = {v: k for k, v in _CHAR_MAP.items()}

# Board labels; pawns are drawn as plain discs.
_LETTERS: dict[PieceKind, str] = {
    PieceKind.PAWN: "",
    PieceKind.KNIGHT: "N",
    PieceKind.BISHOP: "B",
    PieceKind.ROOK: "R",
    PieceKind.QUEEN: "Q",
    PieceKind.KING: "K",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object for an occupied square."""

    side: Side
    kind: PieceKind

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = light, lowercase = dark)."""
        return _FEN_CHARS[(self.side, self.kind)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → light knight."""
        try:
            side, kind = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(side, kind)

    @property
    def letter(self) -> str:
        """Label drawn on the piece disc ('' for pawns)."""
        return _LETTERS[self.kind]


# A square's content: a piece, or None when empty.
Occupant: TypeAlias = Piece | None
