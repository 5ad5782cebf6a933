"""GameController — turns board clicks into selections and moves.

Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from tapchess.core.enums import Side
from tapchess.core.options import RuleOptions
from tapchess.core.types import Square
from tapchess.game.interfaces import IGameController, InteractionPhase
from tapchess.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Square, Square, "GameState"], None]  # from, to, state
SelectionCallback = Callable[[Square | None], None]
TurnCallback = Callable[[Side], None]
ResetCallback = Callable[["GameState"], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_turn_changed: list[TurnCallback] = field(default_factory=list)
    on_new_game: list[ResetCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Runs the select-then-target protocol.

    First click on a piece of the side to move selects it; any other first
    click is ignored. The second click tries the move from the selected
    square and always clears the selection. The turn passes only when the
    move was legal.

    Thread-safety: call from a single thread (the UI thread).
    """

    __slots__ = ("_state", "events")

    def __init__(self, options: RuleOptions | None = None) -> None:
        self._state = GameState(options or RuleOptions())
        self.events = GameEvents()

    @property
    def state(self) -> GameState:
        return self._state

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, options: RuleOptions | None = None) -> None:
        self._state = GameState(options or self._state.options)
        _LOGGER.info("New game, %s to move", self._state.side_to_move)
        for cb in self.events.on_new_game:
            cb(self._state)

    def click(self, sq: Square) -> bool:
        state = self._state
        if state.phase == InteractionPhase.NO_SELECTION:
            if not state.is_selectable(sq):
                _LOGGER.debug("Ignoring click on %s", sq)
                return False
            state.select(sq)
            self._emit_selection(sq)
            return False

        from_sq = state.selected
        assert from_sq is not None
        moved = state.apply_move(from_sq, sq)
        state.clear_selection()
        self._emit_selection(None)
        if moved:
            self._emit_move(from_sq, sq)
            self._emit_turn(state.side_to_move)
        return moved

    def cancel_selection(self) -> None:
        """Drop the current selection, if any."""
        if self._state.selected is None:
            return
        self._state.clear_selection()
        self._emit_selection(None)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, from_sq: Square, to_sq: Square) -> None:
        for cb in self.events.on_move:
            cb(from_sq, to_sq, self._state)

    def _emit_selection(self, sq: Square | None) -> None:
        for cb in self.events.on_selection_changed:
            cb(sq)

    def _emit_turn(self, side: Side) -> None:
        for cb in self.events.on_turn_changed:
            cb(side)
