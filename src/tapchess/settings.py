"""Application settings."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field, replace

from tapchess.core.enums import Side
from tapchess.core.options import RuleOptions

THEMES = ("Classic", "Contrast")

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name}: expected a boolean, got {raw!r}")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Classic"
    tile_size: int = 80
    show_legal_moves: bool = True
    show_hover: bool = True
    flipped: bool = False

    # Logging
    log_level: str = "WARNING"

    # Rules
    rules: RuleOptions = field(default_factory=RuleOptions)

    def __post_init__(self) -> None:
        if self.board_theme not in THEMES:
            raise ValueError(f"Unknown board theme: {self.board_theme!r}")
        if self.tile_size <= 0:
            raise ValueError(f"tile_size must be positive, got {self.tile_size}")
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppSettings:
        """Defaults overridden by ``TAPCHESS_*`` environment variables."""
        env = os.environ if environ is None else environ
        settings = cls()
        kwargs: dict[str, object] = {}

        if "TAPCHESS_THEME" in env:
            kwargs["board_theme"] = env["TAPCHESS_THEME"]
        if "TAPCHESS_TILE_SIZE" in env:
            raw = env["TAPCHESS_TILE_SIZE"]
            try:
                kwargs["tile_size"] = int(raw)
            except ValueError:
                raise ValueError(
                    f"TAPCHESS_TILE_SIZE: expected an integer, got {raw!r}"
                ) from None
        if "TAPCHESS_LOG_LEVEL" in env:
            kwargs["log_level"] = env["TAPCHESS_LOG_LEVEL"].upper()
        if "TAPCHESS_FLIPPED" in env:
            kwargs["flipped"] = _parse_bool("TAPCHESS_FLIPPED", env["TAPCHESS_FLIPPED"])

        rules = settings.rules
        if "TAPCHESS_STRICT_PAWNS" in env:
            rules = replace(
                rules,
                pawn_double_step_needs_clear_path=_parse_bool(
                    "TAPCHESS_STRICT_PAWNS", env["TAPCHESS_STRICT_PAWNS"]
                ),
            )
        if "TAPCHESS_FIRST" in env:
            raw = env["TAPCHESS_FIRST"].strip().upper()
            try:
                rules = replace(rules, first_to_move=Side[raw])
            except KeyError:
                raise ValueError(
                    f"TAPCHESS_FIRST: expected 'light' or 'dark', got {raw.lower()!r}"
                ) from None
        kwargs["rules"] = rules

        return replace(settings, **kwargs)
