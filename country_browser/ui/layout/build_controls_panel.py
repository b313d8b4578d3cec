from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from country_browser.core.population import PopulationBuckets
from country_browser.ui.helpers import bucket_dropdown_options
from country_browser.ui.ids import IDs


def build_controls_panel(buckets: PopulationBuckets) -> html.Div:
    """
    Search box, population selector, Clear and 'Show all Countries'.

    The filter controls sit in their own container so they can be hidden
    while an error is shown; the refresh button always stays visible.
    """
    filter_controls = html.Div(
        id=IDs.Control.CONTROLS_CONTAINER,
        className="d-flex align-items-center gap-2 controls",
        children=[
            dbc.Input(
                id=IDs.Control.SEARCH_INPUT,
                type="text",
                placeholder="Search by name",
                value="",
                debounce=False,
                className="search-input",
                style={"maxWidth": "280px"},
            ),
            dcc.Dropdown(
                id=IDs.Control.BUCKET_SELECT,
                options=bucket_dropdown_options(buckets),
                value=buckets.unfiltered_label,
                clearable=False,
                searchable=False,
                className="filter-select",
                style={"minWidth": "180px"},
            ),
            dbc.Button(
                "Clear",
                id=IDs.Control.CLEAR_BTN,
                color="secondary",
                outline=True,
                className="clear-button",
            ),
        ],
    )

    return html.Div(
        [
            filter_controls,
            dbc.Button(
                "Show all Countries",
                id=IDs.Control.REFRESH_BTN,
                color="primary",
                className="show-all-button ms-auto",
            ),
        ],
        className="d-flex align-items-center gap-2 mb-3",
    )
