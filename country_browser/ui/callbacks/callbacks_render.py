from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Tuple

import dash
from dash import Input, Output, html

from country_browser.core.exceptions import UnknownBucketError
from country_browser.core.view_state import ViewState
from country_browser.ui.helpers import try_parse_view_state
from country_browser.ui.ids import IDs
from country_browser.ui.presenter import PresentationMode, presentation_mode, render_view

if TYPE_CHECKING:
    from country_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

HIDDEN = {"display": "none"}


def render_from_state(ctx: AppConfig, state_data: Any) -> Tuple[Any, dict, bool]:
    """
    ViewState -> (table area, filter controls style, download disabled).
    Filter controls are hidden in error mode; download only works when ready.
    """
    state = try_parse_view_state(state_data)
    if state is None:
        state = ViewState(bucket=ctx.buckets.unfiltered_label)

    mode = presentation_mode(state)
    controls_style = HIDDEN if mode is PresentationMode.ERROR else {}

    try:
        rows = ctx.controller_for(state).filtered()
    except UnknownBucketError:
        logger.exception("Invalid bucket in view state", extra={"bucket": state.bucket})
        return (
            html.Div("Error: invalid population filter.", className="country-error text-danger"),
            controls_style,
            True,
        )

    view = render_view(
        state,
        rows,
        columns=ctx.columns,
        offset_px=ctx.settings.image_offset_px,
    )
    return view, controls_style, mode is not PresentationMode.READY


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # ViewState -> table / spinner / error
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.TABLE_CONTAINER, "children"),
        Output(IDs.Control.CONTROLS_CONTAINER, "style"),
        Output(IDs.Control.DOWNLOAD_CSV_BTN, "disabled"),
        Input(IDs.Store.VIEW_STATE, "data"),
    )
    def update_table_from_state(state_data: dict[str, Any] | None):
        return render_from_state(ctx, state_data)
