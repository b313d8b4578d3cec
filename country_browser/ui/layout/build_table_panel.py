from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from country_browser.core.view_state import ViewState
from country_browser.ui.ids import IDs


def build_table_panel(initial_state: ViewState) -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Strong("Countries"),
                        dbc.Button(
                            "Download CSV",
                            id=IDs.Control.DOWNLOAD_CSV_BTN,
                            color="secondary",
                            size="sm",
                            className="ms-auto",
                        ),
                        dcc.Download(id=IDs.Control.DOWNLOAD_CSV),
                    ],
                    className="d-flex align-items-center",
                ),
                className="p-2",
            ),
            dbc.CardBody(
                # The store lives inside the Loading wrapper so the spinner
                # shows while a refresh is computing the next state.
                dcc.Loading(
                    id="country-table-loading",
                    type="default",
                    delay_show=300,
                    children=[
                        dcc.Store(
                            id=IDs.Store.VIEW_STATE,
                            storage_type="memory",
                            data=initial_state.to_dict(),
                        ),
                        html.Div(id=IDs.Control.TABLE_CONTAINER),
                    ],
                ),
                className="cb-main-body",
            ),
        ],
        className="cb-maincard",
    )
