"""Tests for Position and turn handling."""

from tapchess.core.board import Board
from tapchess.core.enums import Side
from tapchess.core.options import RuleOptions
from tapchess.core.position import Position
from tapchess.core.types import E1, E7


class TestInitial:
    def test_dark_moves_first(self) -> None:
        assert Position.initial().side_to_move == Side.DARK

    def test_classic_options(self) -> None:
        assert Position.initial(RuleOptions.classic()).side_to_move == Side.LIGHT

    def test_standard_board(self) -> None:
        assert Position.initial().board == Board.standard_setup()

    def test_default_is_empty_board(self) -> None:
        pos = Position()
        assert pos.board == Board()
        assert pos.options == RuleOptions()

    def test_explicit_side_wins_over_options(self) -> None:
        pos = Position(side_to_move=Side.LIGHT, options=RuleOptions())
        assert pos.side_to_move == Side.LIGHT


class TestTurn:
    def test_pass_turn_flips(self) -> None:
        pos = Position.initial()
        assert pos.pass_turn() == Side.LIGHT
        assert pos.pass_turn() == Side.DARK


class TestCopy:
    def test_copy_independence(self) -> None:
        pos = Position.initial()
        copy = pos.copy()
        assert copy == pos
        copy.board[E7] = None
        copy.pass_turn()
        assert pos.board[E7] is not None
        assert pos.side_to_move == Side.DARK

    def test_occupant_at(self) -> None:
        pos = Position.initial()
        assert pos.occupant_at(E1) == pos.board[E1]

    def test_repr_names_side(self) -> None:
        assert repr(Position.initial()).endswith("dark to move")


class TestRuleOptions:
    def test_defaults(self) -> None:
        opts = RuleOptions()
        assert opts.first_to_move == Side.DARK
        assert opts.pawn_double_step_needs_clear_path

    def test_legacy(self) -> None:
        assert not RuleOptions.legacy().pawn_double_step_needs_clear_path
        assert RuleOptions.legacy().first_to_move == Side.DARK
