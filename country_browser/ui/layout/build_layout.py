from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc

from country_browser.core.view_state import ViewState
from country_browser.ui.layout.build_controls_panel import build_controls_panel
from country_browser.ui.layout.build_navbar import build_navbar
from country_browser.ui.layout.build_table_panel import build_table_panel

if TYPE_CHECKING:
    from country_browser.ui.config import AppConfig


def build_layout(ctx: AppConfig) -> dbc.Container:
    initial_state = ViewState(bucket=ctx.buckets.unfiltered_label)

    return dbc.Container(
        fluid=True,
        className="cb-root country-list-container",
        children=[
            build_navbar(ctx.settings.ui_title),
            dbc.Row(
                dbc.Col(
                    [
                        build_controls_panel(ctx.buckets),
                        build_table_panel(initial_state),
                    ],
                    md=12,
                    className="mt-3",
                ),
                className="gx-3",
            ),
        ],
    )
