from __future__ import annotations

from country_browser.core.country import Country
from country_browser.core.population import DEFAULT_BUCKETS
from country_browser.ui.columns import DEFAULT_COLUMNS
from country_browser.ui.helpers import bucket_dropdown_options, countries_frame, try_parse_view_state


def test_bucket_dropdown_options_follow_table_order():
    options = bucket_dropdown_options(DEFAULT_BUCKETS)
    assert [o["value"] for o in options] == ["Population", "<1 Million", "<5 Million", "<10 Million"]
    assert all(o["label"] == o["value"] for o in options)


def test_countries_frame_uses_headers_and_keeps_order():
    rows = (
        Country(name="France", code="FR", population=67_000_000, flag="fr.png"),
        Country(name="Fiji", code="FJ", population=900_000, flag="fj.png"),
    )

    df = countries_frame(rows)

    assert list(df.columns) == [c.header for c in DEFAULT_COLUMNS]
    assert df["Country Name"].tolist() == ["France", "Fiji"]
    assert df["Flag"].tolist() == ["fr.png", "fj.png"]


def test_countries_frame_empty_keeps_columns():
    df = countries_frame(())
    assert df.empty
    assert list(df.columns) == [c.header for c in DEFAULT_COLUMNS]


def test_try_parse_view_state_rejects_garbage():
    assert try_parse_view_state(None) is None
    assert try_parse_view_state({}) is None
    assert try_parse_view_state({"status": "nope"}) is None
