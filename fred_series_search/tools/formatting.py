"""Shaping helpers shared by the search operations."""

import json
from typing import Any

from fred_series_search.models import SeriesRecord


SEARCH_NOTES_LIMIT = 200
HIGH_FREQUENCY_NOTES_LIMIT = 150
ELLIPSIS = "..."


def truncate_notes(notes: str | None, max_length: int) -> str | None:
    """Cut notes to max_length characters, marking the cut with an ellipsis."""
    if notes is None or len(notes) <= max_length:
        return notes
    return notes[:max_length] + ELLIPSIS


def format_showing(offset: int, limit: int, count: int) -> str:
    """Human-readable "X-Y" range of the results on the current page."""
    return f"{offset + 1}-{min(offset + limit, count)}"


def summarize_series(
    series: SeriesRecord, notes_limit: int | None = None
) -> dict[str, Any]:
    """Reduce a series to the fields callers see. notes_limit=None keeps full notes."""
    notes = series.notes
    if notes_limit is not None:
        notes = truncate_notes(notes, notes_limit)

    return {
        "id": series.id,
        "title": series.title,
        "units": series.units,
        "frequency": series.frequency,
        "seasonal_adjustment": series.seasonal_adjustment,
        "observation_range": series.observation_range,
        "last_updated": series.last_updated,
        "popularity": series.popularity,
        "notes": notes,
    }


def to_text_content(payload: dict[str, Any]) -> list[dict[str, str]]:
    """Wrap a result as a single pretty-printed JSON text block."""
    return [{"type": "text", "text": json.dumps(payload, indent=2)}]
