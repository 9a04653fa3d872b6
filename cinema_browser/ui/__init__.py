"""
UI adapters for the browser.

Provides a Dash-based web UI via create_dash_app(): one tab per display, with every control
event routed back into the display's intersection pass.
"""

from .dash_app import create_dash_app

__all__ = ["create_dash_app"]
