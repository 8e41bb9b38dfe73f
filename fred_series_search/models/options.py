"""Search options for the series/search endpoint."""

from dataclasses import dataclass, fields
from typing import Literal, get_args


SearchType = Literal["full_text", "series_id"]
SortOrder = Literal["asc", "desc"]
FilterVariable = Literal["frequency", "units", "seasonal_adjustment"]
OrderBy = Literal[
    "search_rank",
    "series_id",
    "title",
    "units",
    "frequency",
    "seasonal_adjustment",
    "realtime_start",
    "realtime_end",
    "last_updated",
    "observation_start",
    "observation_end",
    "popularity",
]

SEARCH_TYPES: tuple[str, ...] = get_args(SearchType)
SORT_ORDERS: tuple[str, ...] = get_args(SortOrder)
FILTER_VARIABLES: tuple[str, ...] = get_args(FilterVariable)
ORDER_BY_FIELDS: tuple[str, ...] = get_args(OrderBy)


@dataclass(frozen=True)
class SearchOptions:
    """
    Filters for a FRED series search. Every field is optional.

    Args:
        search_text: Free-text query
        search_type: "full_text" or "series_id"
        tag_names: Comma-joined tags the series must carry
        exclude_tag_names: Comma-joined tags the series must not carry
        limit: Maximum number of results
        offset: Index of the first result
        order_by: Field to sort on
        sort_order: "asc" or "desc"
        filter_variable: Attribute to filter on
        filter_value: Value the filter attribute must equal
    """

    search_text: str | None = None
    search_type: SearchType | None = None
    tag_names: str | None = None
    exclude_tag_names: str | None = None
    limit: int | None = None
    offset: int | None = None
    order_by: OrderBy | None = None
    sort_order: SortOrder | None = None
    filter_variable: FilterVariable | None = None
    filter_value: str | None = None

    def __post_init__(self) -> None:
        for name, allowed in (
            ("search_type", SEARCH_TYPES),
            ("order_by", ORDER_BY_FIELDS),
            ("sort_order", SORT_ORDERS),
            ("filter_variable", FILTER_VARIABLES),
        ):
            value = getattr(self, name)
            if value is not None and value not in allowed:
                raise ValueError(
                    f"Invalid {name} {value!r}, expected one of: {', '.join(allowed)}"
                )

    def to_query(self) -> dict[str, str | int]:
        """Build query parameters, leaving out anything not set.

        Empty strings are treated as unset; numeric zero is sent.
        """
        query: dict[str, str | int] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, str):
                if value:
                    query[f.name] = value
            elif value is not None:
                query[f.name] = value
        return query
