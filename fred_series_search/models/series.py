"""Data models for FRED series responses."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt, StrictStr
from pydantic import ValidationError as PydanticValidationError

from fred_series_search.errors import ValidationError


FrequencyCategory = Literal["Daily", "Weekly"]


class SeriesRecord(BaseModel):
    """Single series as returned by the series and series/search endpoints."""

    model_config = ConfigDict(frozen=True)

    id: StrictStr
    realtime_start: StrictStr
    realtime_end: StrictStr
    title: StrictStr
    observation_start: StrictStr
    observation_end: StrictStr
    frequency: StrictStr
    frequency_short: StrictStr
    units: StrictStr
    units_short: StrictStr
    seasonal_adjustment: StrictStr
    seasonal_adjustment_short: StrictStr
    last_updated: StrictStr
    popularity: StrictInt | StrictFloat
    notes: StrictStr | None = None

    @property
    def observation_range(self) -> str:
        return f"{self.observation_start} to {self.observation_end}"


class TaggedIndicator(SeriesRecord):
    """Series labelled with the frequency class it was fetched under."""

    frequency_category: FrequencyCategory

    @classmethod
    def from_record(
        cls, record: SeriesRecord, category: FrequencyCategory
    ) -> "TaggedIndicator":
        return cls.model_validate(
            {**record.model_dump(), "frequency_category": category}
        )


class SearchResult(BaseModel):
    """Response body of the series/search endpoint."""

    model_config = ConfigDict(frozen=True)

    realtime_start: StrictStr
    realtime_end: StrictStr
    order_by: StrictStr
    sort_order: StrictStr
    count: StrictInt
    offset: StrictInt
    limit: StrictInt
    seriess: list[SeriesRecord]


class SeriesLookupResult(BaseModel):
    """Response body of the series endpoint."""

    model_config = ConfigDict(frozen=True)

    realtime_start: StrictStr
    realtime_end: StrictStr
    seriess: list[SeriesRecord] = []


def _describe(error: PydanticValidationError) -> str:
    """Flatten pydantic errors into 'field.path: message' pairs."""
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in error.errors()
    )


def parse_search_result(payload: Any) -> SearchResult:
    """Validate a series/search payload, raising ValidationError on mismatch."""
    try:
        return SearchResult.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid series/search response: {_describe(e)}") from e


def parse_lookup_result(payload: Any) -> SeriesLookupResult:
    """Validate a series payload, raising ValidationError on mismatch."""
    try:
        return SeriesLookupResult.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid series response: {_describe(e)}") from e
