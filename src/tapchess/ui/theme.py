"""Visual theme constants for the board."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_hover: QColor  # square under the pointer
    highlight_from: QColor  # selected piece origin
    highlight_to: QColor  # legal move targets
    light_piece: QColor
    light_piece_text: QColor
    dark_piece: QColor
    dark_piece_text: QColor
    piece_border: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_hover=QColor(255, 255, 0, 77),
            highlight_from=QColor(255, 0, 0, 77),
            highlight_to=QColor(0, 255, 0, 77),
            light_piece=QColor(204, 204, 204),
            light_piece_text=QColor(51, 51, 51),
            dark_piece=QColor(51, 51, 51),
            dark_piece_text=QColor(204, 204, 204),
            piece_border=QColor(128, 128, 128),
        )

    @classmethod
    def contrast(cls) -> BoardTheme:
        """Plain black and white tiles."""
        return cls(
            light_square=QColor(255, 255, 255),
            dark_square=QColor(0, 0, 0),
            highlight_hover=QColor(255, 255, 0, 77),
            highlight_from=QColor(255, 0, 0, 77),
            highlight_to=QColor(0, 255, 0, 77),
            light_piece=QColor(204, 204, 204),
            light_piece_text=QColor(51, 51, 51),
            dark_piece=QColor(51, 51, 51),
            dark_piece_text=QColor(204, 204, 204),
            piece_border=QColor(128, 128, 128),
        )

    @classmethod
    def by_name(cls, name: str) -> BoardTheme:
        themes = {"Classic": cls.default, "Contrast": cls.contrast}
        try:
            return themes[name]()
        except KeyError:
            raise ValueError(f"Unknown board theme: {name!r}") from None
