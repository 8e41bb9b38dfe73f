import pytest

from fred_series_search.config import FRED_BASE_URL, Settings
from fred_series_search.models import SearchOptions


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("FRED_API_KEY", "env-key")
    monkeypatch.setenv("FRED_BASE_URL", "https://mirror.example.com/fred/")
    monkeypatch.setenv("FRED_TIMEOUT", "7.5")

    settings = Settings()

    assert settings.fred_api_key == "env-key"
    assert settings.base_url == "https://mirror.example.com/fred"
    assert settings.timeout == 7.5
    settings.validate()


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("FRED_API_KEY", raising=False)
    monkeypatch.delenv("FRED_BASE_URL", raising=False)
    monkeypatch.delenv("FRED_TIMEOUT", raising=False)

    settings = Settings()

    assert settings.base_url == FRED_BASE_URL
    assert settings.timeout == 30.0
    with pytest.raises(ValueError, match="FRED_API_KEY not set"):
        settings.validate()


def test_options_query_omits_unset_and_empty_fields():
    options = SearchOptions(search_text="", tag_names="usa;daily", offset=0)

    assert options.to_query() == {"tag_names": "usa;daily", "offset": 0}


def test_options_query_keeps_field_names():
    options = SearchOptions(
        search_text="oil",
        search_type="full_text",
        exclude_tag_names="discontinued",
        limit=10,
        order_by="title",
        sort_order="asc",
        filter_variable="units",
        filter_value="Percent",
    )

    assert options.to_query() == {
        "search_text": "oil",
        "search_type": "full_text",
        "exclude_tag_names": "discontinued",
        "limit": 10,
        "order_by": "title",
        "sort_order": "asc",
        "filter_variable": "units",
        "filter_value": "Percent",
    }


@pytest.mark.parametrize(
    "field, value",
    [
        ("order_by", "rank"),
        ("sort_order", "descending"),
        ("search_type", "fuzzy"),
        ("filter_variable", "title"),
    ],
)
def test_options_reject_unknown_enum_values(field, value):
    with pytest.raises(ValueError, match=f"Invalid {field}"):
        SearchOptions(**{field: value})
