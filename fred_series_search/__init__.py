"""Client for discovering FRED economic series."""

from fred_series_search.errors import (
    FredError,
    FredOperationError,
    NotFoundError,
    TransportError,
    ValidationError,
)
from fred_series_search.models import SearchOptions
from fred_series_search.tools import (
    get_high_frequency_indicators,
    get_series_info,
    search_series,
)

__all__ = [
    "FredError",
    "FredOperationError",
    "NotFoundError",
    "SearchOptions",
    "TransportError",
    "ValidationError",
    "get_high_frequency_indicators",
    "get_series_info",
    "search_series",
]
