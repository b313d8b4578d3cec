from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional, Tuple

import dash
from dash import Input, Output, State

from country_browser.core.exceptions import UnknownBucketError
from country_browser.core.view_state import ViewState
from country_browser.ui.helpers import try_parse_view_state
from country_browser.ui.ids import IDs

if TYPE_CHECKING:
    from country_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def apply_user_action(
    ctx: AppConfig,
    state_data: Any,
    triggered_id: Optional[str],
    query: Optional[str],
    bucket: Optional[str],
) -> Tuple[ViewState, Any, Any]:
    """
    Pure helper: map the control that fired onto a controller operation.

    Returns the new ViewState plus the values to write back to the search
    box and bucket selector. Only Clear writes them; every other trigger
    returns no_update so a slow response cannot overwrite newer typing.
    """
    state = try_parse_view_state(state_data)
    if state is None:
        state = ViewState(bucket=ctx.buckets.unfiltered_label)

    controller = ctx.controller_for(state)
    controller.subscribe(
        lambda st: logger.debug(
            "view_state_transition",
            extra={"status": st.status.value, "n_records": len(st.records)},
        )
    )

    if triggered_id == IDs.Control.SEARCH_INPUT:
        controller.set_query(query or "")
    elif triggered_id == IDs.Control.BUCKET_SELECT:
        try:
            controller.set_bucket(bucket or ctx.buckets.unfiltered_label)
        except UnknownBucketError:
            # the selector only offers known labels
            logger.exception("Unknown population bucket from selector: %r", bucket)
    elif triggered_id == IDs.Control.CLEAR_BTN:
        controller.clear()
    elif triggered_id == IDs.Control.REFRESH_BTN:
        controller.refresh()

    new_state = controller.state
    if triggered_id == IDs.Control.CLEAR_BTN:
        return new_state, new_state.query, new_state.bucket
    return new_state, dash.no_update, dash.no_update


def register_state_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Controls -> ViewState (single writer of the view-state store)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.VIEW_STATE, "data"),
        Output(IDs.Control.SEARCH_INPUT, "value"),
        Output(IDs.Control.BUCKET_SELECT, "value"),
        Input(IDs.Control.SEARCH_INPUT, "value"),
        Input(IDs.Control.BUCKET_SELECT, "value"),
        Input(IDs.Control.CLEAR_BTN, "n_clicks"),
        Input(IDs.Control.REFRESH_BTN, "n_clicks"),
        State(IDs.Store.VIEW_STATE, "data"),
        prevent_initial_call=True,
    )
    def update_view_state(query, bucket, _clear_clicks, _refresh_clicks, state_data):
        triggered_id = dash.ctx.triggered_id
        if triggered_id is None:
            raise dash.exceptions.PreventUpdate

        new_state, new_query, new_bucket = apply_user_action(
            ctx, state_data, triggered_id, query, bucket
        )
        return new_state.to_dict(), new_query, new_bucket
