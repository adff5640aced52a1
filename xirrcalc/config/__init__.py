"""Configuration module for the XIRR calculator."""

from .settings import Settings, settings
from .xirr_config import XIRRConfig

__all__ = ["Settings", "settings", "XIRRConfig"]
