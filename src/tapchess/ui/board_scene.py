"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QRectF, Qt
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsEllipseItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from tapchess.core.enums import Side
from tapchess.core.piece import Piece
from tapchess.core.types import BOARD_SIZE, Square, all_squares
from tapchess.game.controller import GameController
from tapchess.ui.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders tiles, pieces and highlights; forwards clicks to the controller.

    Holds no game logic: every redraw reads the controller's state.
    """

    TILE = 80  # px per square

    _PIECE_RADIUS = 0.4  # of a tile

    def __init__(
        self,
        controller: GameController,
        parent: QObject | None = None,
        *,
        tile: int | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._theme = BoardTheme.default()
        self._tile = tile or self.TILE
        self._flipped = False
        self._show_legal_moves = True
        self._show_hover = True
        self._hover_sq: Square | None = None

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._piece_items: dict[Square, QGraphicsEllipseItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._legal_dot_items: list[QGraphicsRectItem] = []
        self._hover_item: QGraphicsRectItem | None = None

        events = controller.events
        events.on_move.append(lambda _from, _to, _state: self.refresh())
        events.on_selection_changed.append(lambda _sq: self._sync_highlights())
        events.on_new_game.append(lambda _state: self.refresh())

        self._draw_board()
        self.refresh()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def tile(self) -> int:
        return self._tile

    def refresh(self) -> None:
        """Redraw pieces and highlights from the controller state."""
        self._sync_pieces()
        self._sync_highlights()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self.refresh()

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        self._flipped = flipped
        self._draw_board()
        self.refresh()

    def is_flipped(self) -> bool:
        return self._flipped

    def set_show_legal_moves(self, visible: bool) -> None:
        self._show_legal_moves = visible
        self._sync_highlights()

    def set_show_hover(self, visible: bool) -> None:
        self._show_hover = visible
        if not visible:
            self._set_hover(None)

    def resolve_click(self, x: float, y: float) -> Square | None:
        """Scene pixel position → board square, None outside the board."""
        t = self._tile
        col = int(x // t)
        row = int(y // t)
        if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            return None
        if self._flipped:
            return Square(col, BOARD_SIZE - 1 - row)
        return Square(col, row)

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 tiles."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()

        t = self._tile
        for sq in all_squares():
            is_light = (sq.file + sq.rank) % 2 == 0
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(self._tile_rect(sq))
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current state."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        state = self._controller.state
        for sq in all_squares():
            piece = state.occupant_at(sq)
            if piece is not None:
                item = self._make_piece(sq, piece)
                self.addItem(item)
                self._piece_items[sq] = item

    def _make_piece(self, sq: Square, piece: Piece) -> QGraphicsEllipseItem:
        """A filled disc with the kind letter; children move with it."""
        t = self._tile
        tile_rect = self._tile_rect(sq)
        radius = t * self._PIECE_RADIUS
        center = tile_rect.center()
        disc = QGraphicsEllipseItem(
            center.x() - radius, center.y() - radius, 2 * radius, 2 * radius
        )
        if piece.side == Side.LIGHT:
            fill, text_color = self._theme.light_piece, self._theme.light_piece_text
        else:
            fill, text_color = self._theme.dark_piece, self._theme.dark_piece_text
        disc.setBrush(QBrush(fill))
        pen = QPen(self._theme.piece_border)
        pen.setWidth(2)
        disc.setPen(pen)
        disc.setZValue(1)

        if piece.letter:
            label = QGraphicsSimpleTextItem(piece.letter, disc)
            label.setFont(QFont("Sans Serif", max(9, t // 3)))
            label.setBrush(QBrush(text_color))
            bounds = label.boundingRect()
            label.setPos(
                center.x() - bounds.width() / 2, center.y() - bounds.height() / 2
            )
        return disc

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None or event.button() != Qt.MouseButton.LeftButton:
            return super().mousePressEvent(event)

        pos = event.scenePos()
        sq = self.resolve_click(pos.x(), pos.y())
        if sq is None:
            self._controller.cancel_selection()
            return super().mousePressEvent(event)
        self._on_square_clicked(sq)

    def mouseMoveEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is not None and self._show_hover:
            pos = event.scenePos()
            self._set_hover(self.resolve_click(pos.x(), pos.y()))
        super().mouseMoveEvent(event)

    def _on_square_clicked(self, sq: Square) -> None:
        self._controller.click(sq)

    # ── Highlights ───────────────────────────────────────────────────────

    def _sync_highlights(self) -> None:
        self._clear_items(self._highlight_items)
        self._clear_items(self._legal_dot_items)

        state = self._controller.state
        selected = state.selected_square
        if selected is None:
            return
        rect = self._make_highlight(selected, self._theme.highlight_from)
        self._highlight_items.append(rect)
        if self._show_legal_moves:
            for to_sq in state.highlighted_destinations():
                dot = self._make_highlight(to_sq, self._theme.highlight_to)
                self._legal_dot_items.append(dot)

    def _set_hover(self, sq: Square | None) -> None:
        if sq == self._hover_sq:
            return
        self._hover_sq = sq
        if self._hover_item is not None:
            self.removeItem(self._hover_item)
            self._hover_item = None
        if sq is not None:
            self._hover_item = self._make_highlight(sq, self._theme.highlight_hover)
            self._hover_item.setZValue(0.5)

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, sq: Square) -> tuple[int, int]:
        """Board square → visual column/row."""
        if self._flipped:
            return sq.file, BOARD_SIZE - 1 - sq.rank
        return sq.file, sq.rank

    def _tile_rect(self, sq: Square) -> QRectF:
        t = self._tile
        col, row = self._visual_coords(sq)
        return QRectF(col * t, row * t, t, t)

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        rect = QGraphicsRectItem(self._tile_rect(sq))
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
