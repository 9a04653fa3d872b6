from __future__ import annotations

from typing import List

import dash_bootstrap_components as dbc
from dash import html

from cinema_browser.core.display import Display
from cinema_browser.core.structure import Structure
from cinema_browser.ui.helpers import display_status, render_content
from cinema_browser.ui.ids import display_status_id


def _structure_card(structure: Structure) -> dbc.Card:
    return dbc.Card(
        dbc.CardBody(render_content(structure)),
        className="cinema-structure mb-3",
        id=f"structure-{structure.display.id}-{structure.id}".replace(".", "_"),
    )


def _column(structures: List[Structure], empty_message: str) -> List:
    if not structures:
        return [html.Div(empty_message, className="text-muted")]
    return [_structure_card(s) for s in structures]


def build_display_panel(display: Display) -> html.Div:
    """Inputs on the left, outputs on the right, status line underneath."""
    return html.Div(
        [
            dbc.Row(
                [
                    dbc.Col(
                        _column(list(display.inputs.values()), "No inputs."),
                        md=3,
                        className="mt-3",
                    ),
                    dbc.Col(
                        _column(list(display.outputs.values()), "No outputs."),
                        md=9,
                        className="mt-3",
                    ),
                ],
                className="gx-3",
            ),
            html.Div(
                display_status(display),
                id=display_status_id(display.id),
                className="cinema-status text-muted small",
            ),
        ]
    )
