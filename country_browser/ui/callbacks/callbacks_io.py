from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State, dcc

from country_browser.ui.helpers import countries_frame, try_parse_view_state
from country_browser.ui.ids import IDs
from country_browser.ui.presenter import PresentationMode, presentation_mode

if TYPE_CHECKING:
    from country_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

CSV_FILENAME = "countries.csv"


def register_io_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Download the currently filtered rows as CSV
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DOWNLOAD_CSV, "data"),
        Input(IDs.Control.DOWNLOAD_CSV_BTN, "n_clicks"),
        State(IDs.Store.VIEW_STATE, "data"),
        prevent_initial_call=True,
    )
    def download_filtered_csv(n_clicks, state_data):
        if not n_clicks:
            raise dash.exceptions.PreventUpdate

        state = try_parse_view_state(state_data)
        if state is None or presentation_mode(state) is not PresentationMode.READY:
            raise dash.exceptions.PreventUpdate

        rows = ctx.controller_for(state).filtered()
        df = countries_frame(rows, ctx.columns)

        logger.info(
            "csv_export",
            extra={"n_rows": len(df), "query": state.query, "bucket": state.bucket},
        )
        return dcc.send_data_frame(df.to_csv, CSV_FILENAME, index=False)
