"""Abstract interfaces for the game layer.

The UI depends on these ABCs, not on the concrete controller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tapchess.core.enums import Side
    from tapchess.core.options import RuleOptions
    from tapchess.core.piece import Occupant
    from tapchess.core.types import Square


class InteractionPhase(IntEnum):
    """Two-click interaction states."""

    NO_SELECTION = auto()
    SELECTED = auto()


class IBoardReader(ABC):
    """Read-only queries a renderer needs to draw the game."""

    @abstractmethod
    def occupant_at(self, sq: Square) -> Occupant:
        """Piece on *sq*, or None."""

    @abstractmethod
    def legal_destinations(self, sq: Square) -> list[Square]:
        """Squares the piece on *sq* may move to."""

    @property
    @abstractmethod
    def side_to_move(self) -> Side: ...

    @property
    @abstractmethod
    def selected_square(self) -> Square | None: ...


class IGameController(ABC):
    """Interface for the interaction orchestrator."""

    @abstractmethod
    def new_game(self, options: RuleOptions | None = None) -> None:
        """Reset to the standard setup."""

    @abstractmethod
    def click(self, sq: Square) -> bool:
        """Handle a click on *sq*. Returns True if a move was played."""
