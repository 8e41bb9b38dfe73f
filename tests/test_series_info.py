import json

import pytest

from conftest import FakeRequest, make_series
from fred_series_search import (
    FredOperationError,
    NotFoundError,
    ValidationError,
    get_series_info,
)


def _lookup_response(seriess):
    return {
        "realtime_start": "2025-01-01",
        "realtime_end": "2025-01-01",
        "seriess": seriess,
    }


def test_series_info_returns_first_match_with_full_notes():
    notes = "Long description. " * 40
    request = FakeRequest(
        lambda path, params: _lookup_response(
            [make_series("GDP", notes=notes, popularity=93), make_series("OTHER")]
        )
    )

    content = get_series_info("GDP", request=request)

    assert request.calls == [("series", {"series_id": "GDP"})]
    assert len(content) == 1
    assert content[0]["type"] == "text"
    result = json.loads(content[0]["text"])
    assert result["id"] == "GDP"
    assert result["popularity"] == 93
    assert result["observation_range"] == "2020-01-01 to 2025-01-01"
    assert result["notes"] == notes


def test_series_info_not_found_names_the_series():
    request = FakeRequest(lambda path, params: _lookup_response([]))

    with pytest.raises(FredOperationError) as exc_info:
        get_series_info("NOPE123", request=request)

    assert str(exc_info.value) == "Failed to get series info: Series NOPE123 not found"
    assert isinstance(exc_info.value.__cause__, NotFoundError)


def test_series_info_missing_seriess_is_not_found():
    request = FakeRequest(
        lambda path, params: {"realtime_start": "2025-01-01", "realtime_end": "2025-01-01"}
    )

    with pytest.raises(FredOperationError, match="Series GDP not found"):
        get_series_info("GDP", request=request)


def test_series_info_rejects_invalid_record():
    bad = make_series("GDP", units=None)
    request = FakeRequest(lambda path, params: _lookup_response([bad]))

    with pytest.raises(FredOperationError) as exc_info:
        get_series_info("GDP", request=request)

    assert isinstance(exc_info.value.__cause__, ValidationError)
    assert "seriess.0.units" in str(exc_info.value)
