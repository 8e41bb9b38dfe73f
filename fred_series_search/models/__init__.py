"""Request and response models."""

from fred_series_search.models.options import SearchOptions
from fred_series_search.models.series import (
    SearchResult,
    SeriesLookupResult,
    SeriesRecord,
    TaggedIndicator,
    parse_lookup_result,
    parse_search_result,
)

__all__ = [
    "SearchOptions",
    "SearchResult",
    "SeriesLookupResult",
    "SeriesRecord",
    "TaggedIndicator",
    "parse_lookup_result",
    "parse_search_result",
]
