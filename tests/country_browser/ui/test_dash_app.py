from __future__ import annotations

from dash import Dash, dcc

from country_browser.config import AppSettings
from country_browser.services.country_fetcher import FetchResult
from country_browser.ui.dash_app import create_dash_app
from country_browser.ui.ids import IDs


class _NeverCalledFetcher:
    def fetch(self) -> FetchResult:
        raise AssertionError("layout building must not fetch")


def _walk(component):
    yield component
    children = getattr(component, "children", None)
    if children is None:
        return
    if not isinstance(children, (list, tuple)):
        children = [children]
    for child in children:
        yield from _walk(child)


def _ids(layout) -> set:
    return {getattr(c, "id", None) for c in _walk(layout)} - {None}


def test_create_dash_app_builds_layout_without_fetching():
    app = create_dash_app(AppSettings(ui_title="Countries Info"), fetcher=_NeverCalledFetcher())

    assert isinstance(app, Dash)
    assert app.title == "Countries Info"

    ids = _ids(app.layout)
    for expected in (
        IDs.Store.VIEW_STATE,
        IDs.Control.SEARCH_INPUT,
        IDs.Control.BUCKET_SELECT,
        IDs.Control.CLEAR_BTN,
        IDs.Control.REFRESH_BTN,
        IDs.Control.TABLE_CONTAINER,
        IDs.Control.DOWNLOAD_CSV,
    ):
        assert expected in ids


def test_bucket_selector_offers_the_four_fixed_options():
    app = create_dash_app(AppSettings(), fetcher=_NeverCalledFetcher())

    dropdown = next(
        c for c in _walk(app.layout)
        if getattr(c, "id", None) == IDs.Control.BUCKET_SELECT
    )
    assert isinstance(dropdown, dcc.Dropdown)
    assert [o["value"] for o in dropdown.options] == ["Population", "<1 Million", "<5 Million", "<10 Million"]
    assert dropdown.value == "Population"


def test_initial_store_is_idle_and_empty():
    app = create_dash_app(AppSettings(), fetcher=_NeverCalledFetcher())

    store = next(c for c in _walk(app.layout) if getattr(c, "id", None) == IDs.Store.VIEW_STATE)
    assert store.storage_type == "memory"
    assert store.data["status"] == "idle"
    assert store.data["records"] == []
    assert store.data["has_fetched"] is False
