from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any, List

import dash
from dash import Input, Output
from dash.exceptions import PreventUpdate

from cinema_browser.core.display import Display
from cinema_browser.ui.helpers import display_controls, display_status, display_views
from cinema_browser.ui.ids import display_status_id

if TYPE_CHECKING:
    from cinema_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

# The graph is shared by every browser session; events are applied one at a time
_GRAPH_LOCK = threading.Lock()


def handle_control_event(display: Display, triggered_id: Any, values: List[Any]) -> List[Any]:
    """
    Route a control change to its structure and collect the refreshed view values.

    The control's on_change updates the input's query and runs the display's intersection
    pass synchronously, so by the time it returns every output has re-rendered.
    """
    controls = display_controls(display)
    views = display_views(display)

    for control, value in zip(controls, values):
        if control.component_id == triggered_id:
            with _GRAPH_LOCK:
                control.on_change(value)
            break
    else:
        raise PreventUpdate

    return [v.value for v in views] + [display_status(display)]


def register_display_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    for display in ctx.database.displays.values():
        _register_display(app, display)


def _register_display(app: dash.Dash, display: Display) -> None:
    controls = display_controls(display)
    views = display_views(display)

    if not controls:
        logger.info("Display has no interactive controls", extra={"display": display.id})
        return

    # ---------------------------------------------------------
    # Any control of this display -> every view of this display
    # ---------------------------------------------------------
    @app.callback(
        [Output(v.component_id, v.prop) for v in views]
        + [Output(display_status_id(display.id), "children")],
        [Input(c.component_id, c.prop) for c in controls],
        prevent_initial_call=True,
    )
    def on_control_change(*values: Any):
        try:
            return handle_control_event(display, dash.ctx.triggered_id, list(values))
        except PreventUpdate:
            raise
        except Exception:
            logger.exception(
                "Error while applying control change",
                extra={"display": display.id, "triggered_id": dash.ctx.triggered_id},
            )
            raise PreventUpdate
