from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html


def build_navbar(title: str, subtitle: str = "Search and filter the world's countries") -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H1(title, className="mb-0 title"),
                        html.Small(
                            subtitle,
                            className="text-muted",
                            id="navbar-subtitle",
                        ),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
            ],
        ),
        dark=False,
        className="shadow-sm cb-navbar",
    )
