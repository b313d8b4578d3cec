from __future__ import annotations

from dash import html

from country_browser.core.country import Country
from country_browser.core.exceptions import FetchError
from country_browser.core.view_state import Status, ViewState
from country_browser.ui.columns import DEFAULT_COLUMNS, ColumnKind
from country_browser.ui.presenter import (
    NEVER_FETCHED_HINT,
    NO_MATCHES_HINT,
    PresentationMode,
    presentation_mode,
    render_table,
    render_view,
)


def _walk(component):
    yield component
    children = getattr(component, "children", None)
    if children is None:
        return
    if not isinstance(children, (list, tuple)):
        children = [children]
    for child in children:
        yield from _walk(child)


def _find(component, kind):
    return [c for c in _walk(component) if isinstance(c, kind)]


def _text(component) -> str:
    return " ".join(c for c in _walk(component) if isinstance(c, str))


def _records():
    return (
        Country(name="France", code="FR", population=67_000_000, flag="fr.png", emblem="fr-e.png"),
        Country(name="Fiji", code="FJ", population=900_000, flag="fj.png", emblem="fj-e.png"),
    )


def test_presentation_mode_is_derived_from_status():
    assert presentation_mode(ViewState(status=Status.LOADING)) is PresentationMode.LOADING
    assert presentation_mode(
        ViewState(status=Status.ERROR, last_error=FetchError("x"))
    ) is PresentationMode.ERROR
    assert presentation_mode(ViewState()) is PresentationMode.READY


def test_loading_renders_placeholder_not_table():
    view = render_view(ViewState(status=Status.LOADING), _records())

    assert "Loading..." in _text(view)
    assert _find(view, html.Tbody) == []


def test_error_renders_message_and_suppresses_table():
    state = ViewState(
        records=_records(),
        status=Status.ERROR,
        last_error=FetchError("Network Error"),
        has_fetched=True,
    )

    view = render_view(state, _records())

    assert _text(view) == "Error: Network Error"
    assert _find(view, html.Tbody) == []


def test_ready_renders_header_and_one_row_per_country():
    state = ViewState(records=_records(), has_fetched=True)

    view = render_view(state, _records())

    headers = [th.children for th in _find(view, html.Th)]
    assert headers == [col.header for col in DEFAULT_COLUMNS]

    body = _find(view, html.Tbody)[0]
    rows = body.children
    assert len(rows) == 2
    # rows keyed by flag URI
    assert [r.key for r in rows] == ["fr.png", "fj.png"]
    assert "2 of 2 countries" in _text(view)


def test_image_columns_render_deferred_images():
    table = render_table(_records()[:1])
    images = _find(table, html.Img)

    n_image_columns = len([c for c in DEFAULT_COLUMNS if c.kind is ColumnKind.IMAGE])
    assert len(images) == n_image_columns
    data_srcs = [img.to_plotly_json()["props"]["data-src"] for img in images]
    assert data_srcs == ["fr.png", "fr-e.png"]


def test_zero_rows_is_not_an_error():
    state = ViewState(records=_records(), query="zzz", has_fetched=True)

    view = render_view(state, ())

    assert NO_MATCHES_HINT in _text(view)
    assert "0 of 2 countries" in _text(view)
    assert len(_find(view, html.Th)) == len(DEFAULT_COLUMNS)


def test_never_fetched_has_its_own_hint():
    view = render_view(ViewState(), ())
    assert NEVER_FETCHED_HINT in _text(view)
