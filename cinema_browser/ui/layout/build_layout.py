from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc

from cinema_browser.ui.config import AppConfig
from cinema_browser.ui.ids import IDs, display_tab_value
from cinema_browser.ui.layout.build_display_panel import build_display_panel
from cinema_browser.ui.layout.build_navbar import build_navbar


def build_layout(ctx: AppConfig):
    db = ctx.database
    navbar = build_navbar(ctx.ui_title, db.info)

    if not db.displays:
        return dbc.Container(
            fluid=True,
            className="cinema-root",
            children=[
                navbar,
                dbc.Card(
                    dbc.CardBody("No displays configured. Check the database JSON and the logs."),
                ),
            ],
        )

    tabs = [
        dcc.Tab(
            label=display.label or display_id,
            value=display_tab_value(display_id),
            children=[build_display_panel(display)],
        )
        for display_id, display in db.displays.items()
    ]

    return dbc.Container(
        fluid=True,
        className="cinema-root",
        children=[
            navbar,
            dcc.Tabs(
                id=IDs.Control.DISPLAY_TABS,
                value=tabs[0].value,
                children=tabs,
                className="mt-2",
            ),
        ],
    )
