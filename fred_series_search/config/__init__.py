"""Configuration."""

from .settings import FRED_BASE_URL, Settings

__all__ = ["FRED_BASE_URL", "Settings"]
