"""Rule options - the switches that differ between rule variants."""

from __future__ import annotations

from dataclasses import dataclass

from tapchess.core.enums import Side


@dataclass(frozen=True)
class RuleOptions:
    """Immutable rule configuration for a game.

    Args:
        first_to_move: Side that moves first. Dark opens by default.
        pawn_double_step_needs_clear_path: Require the square a pawn skips
            on its double step to be empty. When False the pawn may jump
            over a piece directly in front of it.
    """

    first_to_move: Side = Side.DARK
    pawn_double_step_needs_clear_path: bool = True

    @classmethod
    def classic(cls) -> RuleOptions:
        """Light moves first and pawns cannot jump."""
        return cls(first_to_move=Side.LIGHT)

    @classmethod
    def legacy(cls) -> RuleOptions:
        """Dark moves first and the pawn double step ignores the skipped square."""
        return cls(pawn_double_step_needs_clear_path=False)
