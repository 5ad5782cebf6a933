"""Game state — board, turn and the current selection."""

from __future__ import annotations

from dataclasses import dataclass, field

from tapchess.core.enums import Side
from tapchess.core.move_generator import MoveGenerator
from tapchess.core.options import RuleOptions
from tapchess.core.piece import Occupant
from tapchess.core.position import Position
from tapchess.core.rules import Rules
from tapchess.core.types import Square
from tapchess.game.interfaces import IBoardReader, InteractionPhase


@dataclass(eq=False)
class GameState(IBoardReader):
    """Owns the position and the selected square.

    This is a pure data/logic class — no Qt, no I/O.
    """

    options: RuleOptions = field(default_factory=RuleOptions)
    position: Position = field(init=False)
    selected: Square | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.position = Position.initial(self.options)

    # ── Render queries ───────────────────────────────────────────────────

    def occupant_at(self, sq: Square) -> Occupant:
        return self.position.board.occupant_at(sq)

    def legal_destinations(self, sq: Square) -> list[Square]:
        return MoveGenerator(self.position).legal_destinations(sq)

    @property
    def side_to_move(self) -> Side:
        return self.position.side_to_move

    @property
    def selected_square(self) -> Square | None:
        return self.selected

    @property
    def phase(self) -> InteractionPhase:
        if self.selected is None:
            return InteractionPhase.NO_SELECTION
        return InteractionPhase.SELECTED

    def highlighted_destinations(self) -> list[Square]:
        """Legal destinations of the selected piece (empty with no selection)."""
        if self.selected is None:
            return []
        return self.legal_destinations(self.selected)

    # ── Selection ────────────────────────────────────────────────────────

    def is_selectable(self, sq: Square) -> bool:
        return Rules.is_selectable(self.position, sq)

    def select(self, sq: Square) -> None:
        """Select the piece on *sq*; raises :class:`MoveError` if not allowed."""
        Rules.check_selection(self.position, sq)
        self.selected = sq

    def clear_selection(self) -> None:
        self.selected = None

    # ── Moves ────────────────────────────────────────────────────────────

    def apply_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Apply a move; the turn passes on success."""
        return Rules.apply_move(self.position, from_sq, to_sq)
