"""Application configuration settings."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Default settings for the XIRR calculator."""

    # Newton-Raphson
    newton_raphson_tolerance: float = 1e-7
    newton_raphson_max_iterations: int = 10_000

    # Rate calculation
    days_per_year: float = 365.0
    guess_strategy: str = "return_over_deposits"
    initial_guess: Optional[float] = None

    # Date Settings
    date_format: Optional[str] = None

    # Logging
    log_level: str = "WARNING"


# Global settings instance
settings = Settings()
