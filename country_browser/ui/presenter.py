from __future__ import annotations

from enum import Enum
from typing import Sequence, Tuple

import dash_bootstrap_components as dbc
from dash import html

from country_browser.core.country import Country
from country_browser.core.view_state import Status, ViewState
from country_browser.ui.columns import DEFAULT_COLUMNS, ColumnDef
from country_browser.ui.lazy_image import DEFAULT_OFFSET_PX

NEVER_FETCHED_HINT = "Press 'Show all Countries' to load data."
NO_MATCHES_HINT = "No countries match the current filters."
ROW_HEIGHT_PX = 75


class PresentationMode(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    READY = "ready"


def presentation_mode(state: ViewState) -> PresentationMode:
    """Derived from status only; never stored."""
    if state.status is Status.LOADING:
        return PresentationMode.LOADING
    if state.status is Status.ERROR:
        return PresentationMode.ERROR
    return PresentationMode.READY


def render_view(
    state: ViewState,
    rows: Sequence[Country],
    columns: Tuple[ColumnDef, ...] = DEFAULT_COLUMNS,
    offset_px: int = DEFAULT_OFFSET_PX,
):
    mode = presentation_mode(state)

    if mode is PresentationMode.LOADING:
        return html.Div(
            [dbc.Spinner(size="sm", spinner_class_name="me-2"), "Loading..."],
            className="country-loading d-flex align-items-center",
        )

    if mode is PresentationMode.ERROR:
        return html.Div(
            f"Error: {state.error_message}",
            className="country-error text-danger",
        )

    return html.Div(
        [
            html.Small(
                result_summary(len(rows), len(state.records)),
                className="text-muted country-summary",
            ),
            render_table(rows, columns, offset_px, empty_hint=_empty_hint(state)),
        ]
    )


def result_summary(shown: int, total: int) -> str:
    return f"{shown} of {total} countries"


def render_table(
    rows: Sequence[Country],
    columns: Tuple[ColumnDef, ...] = DEFAULT_COLUMNS,
    offset_px: int = DEFAULT_OFFSET_PX,
    empty_hint: str | None = None,
) -> dbc.Table:
    header = html.Thead(html.Tr([html.Th(col.header) for col in columns]))

    if rows:
        body_rows = [
            # Rows are keyed by flag URI; two countries sharing a flag URI would collide
            html.Tr(
                [col.render_cell(country, offset_px) for col in columns],
                key=country.flag or f"row-{i}",
                style={"height": f"{ROW_HEIGHT_PX}px"},
            )
            for i, country in enumerate(rows)
        ]
    else:
        body_rows = [
            html.Tr(
                html.Td(empty_hint or "", colSpan=len(columns), className="text-muted"),
                key="empty",
            )
        ]

    return dbc.Table(
        [header, html.Tbody(body_rows)],
        className="country-table",
        hover=True,
        size="sm",
    )


def _empty_hint(state: ViewState) -> str:
    return NO_MATCHES_HINT if state.has_fetched else NEVER_FETCHED_HINT
