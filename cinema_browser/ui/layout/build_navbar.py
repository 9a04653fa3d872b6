from __future__ import annotations

from typing import Any, Dict

import dash_bootstrap_components as dbc
from dash import html

from cinema_browser.ui.ids import IDs


def build_navbar(title: str, info: Dict[str, Any]) -> dbc.Navbar:
    """Title bar; the subtitle summarises the database's 'cinema' section."""
    subtitle_parts = [str(info[k]) for k in ("type", "version") if info.get(k)]
    subtitle = " ".join(subtitle_parts) or "Cinema database"

    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(title, className="mb-0"),
                        html.Small(subtitle, className="text-muted", id=IDs.Layout.NAVBAR_SUBTITLE),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
            ],
        ),
        color="light",
        className="mb-2",
    )
