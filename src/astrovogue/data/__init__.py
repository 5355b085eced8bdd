"""External data sources for daily readings."""

from .astrology_api import AstrologyAPIClient

__all__ = ["AstrologyAPIClient"]
