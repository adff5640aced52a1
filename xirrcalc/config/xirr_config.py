"""Per-calculation configuration for the XIRR solver."""

import math
from dataclasses import dataclass, replace
from typing import Optional

from ..models.enums import GuessStrategy
from .settings import Settings, settings


@dataclass(frozen=True)
class XIRRConfig:
    """Options for one XIRR calculation."""

    tolerance: float = 1e-7
    max_iterations: int = 10_000
    days_per_year: float = 365.0
    initial_guess: Optional[float] = None
    guess_strategy: GuessStrategy = GuessStrategy.RETURN_OVER_DEPOSITS

    def __post_init__(self):
        """Reject values the solver cannot work with."""
        if not self.tolerance > 0:
            raise ValueError(f"tolerance must be positive, got {self.tolerance}")
        if not isinstance(self.max_iterations, int) or self.max_iterations < 1:
            raise ValueError(f"max_iterations must be an integer of at least 1, got {self.max_iterations!r}")
        if not (self.days_per_year > 0 and math.isfinite(self.days_per_year)):
            raise ValueError(f"days_per_year must be positive and finite, got {self.days_per_year}")
        if self.initial_guess is not None and not math.isfinite(self.initial_guess):
            raise ValueError(f"initial_guess must be finite, got {self.initial_guess}")
        if isinstance(self.guess_strategy, str):
            object.__setattr__(self, "guess_strategy", GuessStrategy.from_string(self.guess_strategy))

    @classmethod
    def from_settings(cls, source: Optional[Settings] = None) -> "XIRRConfig":
        """Build a config from application settings."""
        source = source or settings
        return cls(
            tolerance=source.newton_raphson_tolerance,
            max_iterations=source.newton_raphson_max_iterations,
            days_per_year=source.days_per_year,
            initial_guess=source.initial_guess,
            guess_strategy=GuessStrategy.from_string(source.guess_strategy),
        )

    def with_overrides(self, **changes) -> "XIRRConfig":
        """Copy of this config with the given fields replaced; None values are ignored."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
