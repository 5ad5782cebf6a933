"""Tests for GameController — the click-driven interaction bridge."""

from tapchess.core.enums import PieceKind, Side
from tapchess.core.options import RuleOptions
from tapchess.core.piece import Piece
from tapchess.core.types import D2, D4, D7, E2, E4, E5, E7, G8, H6, Square
from tapchess.game.controller import GameController
from tapchess.game.interfaces import InteractionPhase
from tapchess.game.state import GameState


class TestFirstClick:
    def test_selects_piece_of_side_to_move(self) -> None:
        ctrl = GameController()
        assert not ctrl.click(E7)
        assert ctrl.state.selected_square == E7

    def test_opponent_piece_ignored(self) -> None:
        ctrl = GameController()
        assert not ctrl.click(E2)
        assert ctrl.state.phase == InteractionPhase.NO_SELECTION

    def test_empty_square_ignored(self) -> None:
        ctrl = GameController()
        assert not ctrl.click(E4)
        assert ctrl.state.selected_square is None


class TestSecondClick:
    def test_legal_target_moves_and_flips(self) -> None:
        ctrl = GameController()
        ctrl.click(E7)
        assert ctrl.click(E5)
        assert ctrl.state.occupant_at(E5) == Piece(Side.DARK, PieceKind.PAWN)
        assert ctrl.state.occupant_at(E7) is None
        assert ctrl.state.side_to_move == Side.LIGHT
        assert ctrl.state.selected_square is None

    def test_illegal_target_deselects_keeps_turn(self) -> None:
        ctrl = GameController()
        ctrl.click(E7)
        assert not ctrl.click(E4)
        assert ctrl.state.selected_square is None
        assert ctrl.state.side_to_move == Side.DARK
        assert ctrl.state.occupant_at(E7) is not None

    def test_clicking_own_piece_deselects(self) -> None:
        ctrl = GameController()
        ctrl.click(E7)
        assert not ctrl.click(D7)
        assert ctrl.state.selected_square is None
        assert ctrl.state.side_to_move == Side.DARK

    def test_off_board_target_deselects(self) -> None:
        ctrl = GameController()
        ctrl.click(E7)
        assert not ctrl.click(Square(4, -1))
        assert ctrl.state.selected_square is None
        assert ctrl.state.side_to_move == Side.DARK

    def test_clicking_selected_square_deselects(self) -> None:
        ctrl = GameController()
        ctrl.click(G8)
        assert not ctrl.click(G8)
        assert ctrl.state.phase == InteractionPhase.NO_SELECTION

    def test_short_game_with_capture(self) -> None:
        ctrl = GameController()
        for sq in (E7, E5, D2, D4, E5, D4):
            ctrl.click(sq)
        assert ctrl.state.occupant_at(D4) == Piece(Side.DARK, PieceKind.PAWN)
        assert ctrl.state.occupant_at(E5) is None
        assert len(ctrl.state.position.board.pieces(Side.LIGHT)) == 15
        assert ctrl.state.side_to_move == Side.LIGHT

    def test_knight_jump(self) -> None:
        ctrl = GameController()
        ctrl.click(G8)
        assert ctrl.click(H6)
        assert ctrl.state.occupant_at(H6) == Piece(Side.DARK, PieceKind.KNIGHT)


class TestEvents:
    def test_move_event(self) -> None:
        ctrl = GameController()
        moves: list[tuple[Square, Square]] = []
        ctrl.events.on_move.append(lambda f, t, st: moves.append((f, t)))
        ctrl.click(E7)
        ctrl.click(E5)
        assert moves == [(E7, E5)]

    def test_no_move_event_on_failure(self) -> None:
        ctrl = GameController()
        moves: list[object] = []
        turns: list[Side] = []
        ctrl.events.on_move.append(lambda f, t, st: moves.append(t))
        ctrl.events.on_turn_changed.append(turns.append)
        ctrl.click(E7)
        ctrl.click(E4)
        assert moves == []
        assert turns == []

    def test_turn_event(self) -> None:
        ctrl = GameController()
        turns: list[Side] = []
        ctrl.events.on_turn_changed.append(turns.append)
        for sq in (E7, E5, E2, E4):
            ctrl.click(sq)
        assert turns == [Side.LIGHT, Side.DARK]

    def test_selection_events(self) -> None:
        ctrl = GameController()
        seen: list[Square | None] = []
        ctrl.events.on_selection_changed.append(seen.append)
        ctrl.click(E4)  # ignored
        ctrl.click(E7)
        ctrl.click(E4)  # illegal
        assert seen == [E7, None]

    def test_cancel_selection(self) -> None:
        ctrl = GameController()
        seen: list[Square | None] = []
        ctrl.events.on_selection_changed.append(seen.append)
        ctrl.cancel_selection()
        ctrl.click(E7)
        ctrl.cancel_selection()
        assert seen == [E7, None]
        assert ctrl.state.selected_square is None


class TestNewGame:
    def test_resets_state(self) -> None:
        ctrl = GameController()
        ctrl.click(E7)
        ctrl.click(E5)
        resets: list[GameState] = []
        ctrl.events.on_new_game.append(resets.append)
        ctrl.new_game()
        assert resets == [ctrl.state]
        assert ctrl.state.side_to_move == Side.DARK
        assert ctrl.state.occupant_at(E7) is not None

    def test_keeps_options_unless_given(self) -> None:
        ctrl = GameController(RuleOptions.classic())
        ctrl.new_game()
        assert ctrl.state.side_to_move == Side.LIGHT
        ctrl.new_game(RuleOptions())
        assert ctrl.state.side_to_move == Side.DARK
