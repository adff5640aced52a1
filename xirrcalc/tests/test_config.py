"""Tests for configuration."""

import dataclasses

import pytest

from xirrcalc.config.settings import Settings
from xirrcalc.config.xirr_config import XIRRConfig
from xirrcalc.models.enums import GuessStrategy


class TestXIRRConfig:
    """Tests for per-calculation options."""

    def test_defaults(self):
        config = XIRRConfig()

        assert config.tolerance == 1e-7
        assert config.max_iterations == 10_000
        assert config.days_per_year == 365.0
        assert config.initial_guess is None
        assert config.guess_strategy is GuessStrategy.RETURN_OVER_DEPOSITS

    def test_from_settings(self):
        """Test settings supply the defaults."""
        custom = Settings(
            newton_raphson_tolerance=1e-9,
            newton_raphson_max_iterations=200,
            days_per_year=360.0,
            guess_strategy="sign_of_total",
            initial_guess=0.05,
        )

        config = XIRRConfig.from_settings(custom)

        assert config == XIRRConfig(
            tolerance=1e-9,
            max_iterations=200,
            days_per_year=360.0,
            initial_guess=0.05,
            guess_strategy=GuessStrategy.SIGN_OF_TOTAL,
        )

    def test_strategy_string_accepted(self):
        assert XIRRConfig(guess_strategy="sign_of_total").guess_strategy is GuessStrategy.SIGN_OF_TOTAL

    def test_with_overrides(self):
        """Test None leaves a field unchanged."""
        config = XIRRConfig().with_overrides(days_per_year=360.0, initial_guess=None)

        assert config.days_per_year == 360.0
        assert config.initial_guess is None
        assert config.tolerance == 1e-7

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            XIRRConfig().tolerance = 1.0

    @pytest.mark.parametrize("kwargs", [
        {"tolerance": 0},
        {"tolerance": float("nan")},
        {"max_iterations": 0},
        {"days_per_year": -365},
        {"days_per_year": float("inf")},
        {"days_per_year": float("nan")},
        {"max_iterations": 10.5},
        {"initial_guess": float("inf")},
        {"guess_strategy": "coin_flip"},
    ])
    def test_rejects_invalid(self, kwargs):
        with pytest.raises(ValueError):
            XIRRConfig(**kwargs)
