"""Search operations returning formatted text payloads."""

from fred_series_search.tools.search import (
    get_high_frequency_indicators,
    get_series_info,
    search_series,
)

__all__ = ["get_high_frequency_indicators", "get_series_info", "search_series"]
