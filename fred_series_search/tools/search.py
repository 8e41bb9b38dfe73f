"""Series discovery operations on top of the FRED search endpoints."""

import logging
import math
from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from typing import Any

from fred_series_search.data import FredClient, RequestFn
from fred_series_search.errors import FredOperationError, NotFoundError
from fred_series_search.models import (
    SearchOptions,
    SearchResult,
    TaggedIndicator,
    parse_lookup_result,
    parse_search_result,
)
from fred_series_search.models.series import FrequencyCategory
from fred_series_search.tools.formatting import (
    HIGH_FREQUENCY_NOTES_LIMIT,
    SEARCH_NOTES_LIMIT,
    format_showing,
    summarize_series,
    to_text_content,
)


logger = logging.getLogger(__name__)

SEARCH_ENDPOINT = "series/search"
SERIES_ENDPOINT = "series"

SEARCH_FAILED = "Failed to search FRED series"
HIGH_FREQUENCY_FAILED = "Failed to get high frequency indicators"
SERIES_INFO_FAILED = "Failed to get series info"

DEFAULT_HIGH_FREQUENCY_LIMIT = 100


@contextmanager
def _resolve_request(request: RequestFn | None) -> Iterator[RequestFn]:
    """Use the caller's transport, or a FredClient open for the duration."""
    if request is not None:
        yield request
        return
    with FredClient() as client:
        yield client.request


def search_series(
    options: SearchOptions | None = None, request: RequestFn | None = None
) -> list[dict[str, str]]:
    """
    Search FRED series.

    Args:
        options: Search filters; None searches without filters
        request: Transport to use instead of a default FredClient

    Returns:
        Single text block holding the formatted results as JSON

    Raises:
        FredOperationError: If the request or response validation fails
    """
    try:
        query = (options or SearchOptions()).to_query()
        logger.info(f"Searching FRED series: {query}")

        with _resolve_request(request) as fetch:
            response = parse_search_result(fetch(SEARCH_ENDPOINT, query))

        logger.debug(f"  {len(response.seriess)} of {response.count} series returned")

        formatted = {
            "total_results": response.count,
            "showing": format_showing(response.offset, response.limit, response.count),
            "results": [
                summarize_series(series, SEARCH_NOTES_LIMIT)
                for series in response.seriess
            ],
        }
        return to_text_content(formatted)
    except Exception as e:
        logger.error(f"{SEARCH_FAILED}: {e}")
        raise FredOperationError(SEARCH_FAILED, str(e)) from e


def _search_frequency_class(
    request: RequestFn, category: FrequencyCategory, limit: int
) -> SearchResult:
    """Fetch the most popular series of one frequency class."""
    options = SearchOptions(
        filter_variable="frequency",
        filter_value=category,
        order_by="popularity",
        sort_order="desc",
        limit=limit,
        offset=0,
    )
    return parse_search_result(request(SEARCH_ENDPOINT, options.to_query()))


def _summarize_indicator(indicator: TaggedIndicator) -> dict[str, Any]:
    summary = summarize_series(indicator, HIGH_FREQUENCY_NOTES_LIMIT)
    return {
        "id": summary["id"],
        "title": summary["title"],
        "frequency": summary["frequency"],
        "frequency_category": indicator.frequency_category,
        "units": summary["units"],
        "seasonal_adjustment": summary["seasonal_adjustment"],
        "observation_range": summary["observation_range"],
        "last_updated": summary["last_updated"],
        "popularity": summary["popularity"],
        "notes": summary["notes"],
    }


def get_high_frequency_indicators(
    limit: int = DEFAULT_HIGH_FREQUENCY_LIMIT, request: RequestFn | None = None
) -> list[dict[str, str]]:
    """
    Get the most popular Daily and Weekly indicators.

    Each frequency class is fetched with a limit of ceil(limit / 2); the two
    result sets are merged, sorted by popularity and cut to limit. A class
    with more popular series than its share can therefore be under-represented.

    Args:
        limit: Number of indicators to return
        request: Transport to use instead of a default FredClient

    Returns:
        Single text block holding the formatted indicators as JSON

    Raises:
        FredOperationError: If either request fails or returns invalid data
    """
    try:
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise ValueError(f"limit must be a positive integer, got {limit!r}")

        per_class_limit = math.ceil(limit / 2)
        logger.info(
            f"Fetching top {limit} high frequency indicators "
            f"({per_class_limit} per frequency class)"
        )

        with _resolve_request(request) as fetch, ThreadPoolExecutor(max_workers=2) as executor:
            daily_future = executor.submit(
                _search_frequency_class, fetch, "Daily", per_class_limit
            )
            weekly_future = executor.submit(
                _search_frequency_class, fetch, "Weekly", per_class_limit
            )
            daily = daily_future.result()
            weekly = weekly_future.result()

        combined = [
            TaggedIndicator.from_record(series, "Daily") for series in daily.seriess
        ] + [
            TaggedIndicator.from_record(series, "Weekly") for series in weekly.seriess
        ]
        # sorted() is stable, so equal popularity keeps Daily ahead of Weekly
        top_indicators = sorted(combined, key=lambda s: s.popularity, reverse=True)[:limit]

        logger.debug(
            f"  Merged {len(daily.seriess)} daily and {len(weekly.seriess)} weekly, "
            f"keeping {len(top_indicators)}"
        )

        formatted = {
            "description": (
                f"Top {len(top_indicators)} high frequency (Daily/Weekly) "
                "economic indicators"
            ),
            "total_daily": daily.count,
            "total_weekly": weekly.count,
            "showing_top": len(top_indicators),
            "indicators": [_summarize_indicator(s) for s in top_indicators],
        }
        return to_text_content(formatted)
    except Exception as e:
        logger.error(f"{HIGH_FREQUENCY_FAILED}: {e}")
        raise FredOperationError(HIGH_FREQUENCY_FAILED, str(e)) from e


def get_series_info(
    series_id: str, request: RequestFn | None = None
) -> list[dict[str, str]]:
    """
    Get full details for a single series.

    Args:
        series_id: FRED series ID, e.g. "GDP"
        request: Transport to use instead of a default FredClient

    Returns:
        Single text block holding the first matching series as JSON, notes
        untruncated

    Raises:
        FredOperationError: If the series does not exist or the request fails
    """
    try:
        logger.info(f"Fetching series info for {series_id}")

        with _resolve_request(request) as fetch:
            response = parse_lookup_result(
                fetch(SERIES_ENDPOINT, {"series_id": series_id})
            )

        if not response.seriess:
            raise NotFoundError(f"Series {series_id} not found")

        return to_text_content(summarize_series(response.seriess[0]))
    except Exception as e:
        logger.error(f"{SERIES_INFO_FAILED}: {e}")
        raise FredOperationError(SERIES_INFO_FAILED, str(e)) from e
