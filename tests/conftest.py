def make_series(series_id="DGS10", **overrides):
    series = {
        "id": series_id,
        "realtime_start": "2025-01-01",
        "realtime_end": "2025-01-01",
        "title": f"Series {series_id}",
        "observation_start": "2020-01-01",
        "observation_end": "2025-01-01",
        "frequency": "Daily",
        "frequency_short": "D",
        "units": "Percent",
        "units_short": "%",
        "seasonal_adjustment": "Not Seasonally Adjusted",
        "seasonal_adjustment_short": "NSA",
        "last_updated": "2025-01-01 15:16:03-06",
        "popularity": 50,
        "notes": "Economic indicator",
    }
    series.update(overrides)
    return series


def make_search_response(seriess, count=None, offset=0, limit=1000):
    return {
        "realtime_start": "2025-01-01",
        "realtime_end": "2025-01-01",
        "order_by": "popularity",
        "sort_order": "desc",
        "count": len(seriess) if count is None else count,
        "offset": offset,
        "limit": limit,
        "seriess": seriess,
    }


class FakeRequest:
    """Records calls and answers from a handler keyed on the query."""

    def __init__(self, handler):
        self.handler = handler
        self.calls = []

    def __call__(self, path, params):
        self.calls.append((path, dict(params)))
        result = self.handler(path, dict(params))
        if isinstance(result, BaseException):
            raise result
        return result
