"""Tests for AppSettings."""

import pytest

from tapchess.core.enums import Side
from tapchess.core.options import RuleOptions
from tapchess.settings import AppSettings


class TestDefaults:
    def test_defaults(self) -> None:
        s = AppSettings()
        assert s.board_theme == "Classic"
        assert s.tile_size == 80
        assert s.log_level == "WARNING"
        assert s.rules == RuleOptions()

    def test_log_level_normalised(self) -> None:
        assert AppSettings(log_level="debug").log_level == "DEBUG"

    @pytest.mark.parametrize(
        "kwargs",
        [{"board_theme": "Neon"}, {"tile_size": 0}, {"log_level": "loud"}],
    )
    def test_invalid_values(self, kwargs: dict[str, object]) -> None:
        with pytest.raises(ValueError):
            AppSettings(**kwargs)  # type: ignore[arg-type]


class TestFromEnv:
    def test_empty_env_gives_defaults(self) -> None:
        assert AppSettings.from_env({}) == AppSettings()

    def test_overrides(self) -> None:
        s = AppSettings.from_env(
            {
                "TAPCHESS_THEME": "Contrast",
                "TAPCHESS_TILE_SIZE": "60",
                "TAPCHESS_LOG_LEVEL": "info",
                "TAPCHESS_FLIPPED": "yes",
                "TAPCHESS_STRICT_PAWNS": "0",
                "TAPCHESS_FIRST": "light",
            }
        )
        assert s.board_theme == "Contrast"
        assert s.tile_size == 60
        assert s.log_level == "INFO"
        assert s.flipped
        assert s.rules == RuleOptions(
            first_to_move=Side.LIGHT, pawn_double_step_needs_clear_path=False
        )

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TAPCHESS_TILE_SIZE", "100")
        assert AppSettings.from_env().tile_size == 100

    @pytest.mark.parametrize(
        ("name", "value", "message"),
        [
            ("TAPCHESS_TILE_SIZE", "big", "expected an integer"),
            ("TAPCHESS_FLIPPED", "maybe", "expected a boolean"),
            ("TAPCHESS_FIRST", "green", "expected 'light' or 'dark'"),
            ("TAPCHESS_THEME", "Neon", "Unknown board theme"),
        ],
    )
    def test_bad_values(self, name: str, value: str, message: str) -> None:
        with pytest.raises(ValueError, match=message):
            AppSettings.from_env({name: value})
