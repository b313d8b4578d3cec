from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import dash_bootstrap_components as dbc
from dash import Dash

from country_browser.config import AppSettings
from country_browser.core.population import DEFAULT_BUCKETS
from country_browser.services.country_fetcher import CountryFetcher
from country_browser.ui.config import AppConfig
from country_browser.ui.layout.build_layout import build_layout
from country_browser.ui.callbacks.callbacks_state import register_state_callbacks
from country_browser.ui.callbacks.callbacks_render import register_render_callbacks
from country_browser.ui.callbacks.callbacks_io import register_io_callbacks

logger = logging.getLogger(__name__)


def create_dash_app(
    settings: Optional[AppSettings] = None,
    fetcher: Optional[CountryFetcher] = None,
) -> Dash:
    # 1) Settings
    if settings is None:
        settings = AppSettings.from_env()

    # 2) Service layer
    if fetcher is None:
        fetcher = CountryFetcher(
            url=settings.api_url,
            timeout_seconds=settings.timeout_seconds,
        )

    # 3) App context
    ctx = AppConfig(
        settings=settings,
        fetcher=fetcher,
        buckets=DEFAULT_BUCKETS,
    )

    # assets/ holds styles.css and the lazy image loader script
    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )
    app.title = settings.ui_title
    app.layout = build_layout(ctx)

    # Register callbacks
    register_state_callbacks(app, ctx)
    register_render_callbacks(app, ctx)
    register_io_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={"api_url": settings.api_url, "buckets": list(ctx.buckets.labels)},
    )
    return app
