from __future__ import annotations

__all__ = ["IDs", "display_tab_value", "display_status_id"]


class IDs:
    class Control:
        DISPLAY_TABS = "display-tabs"

    class Layout:
        NAVBAR_SUBTITLE = "navbar-subtitle"


def display_tab_value(display_id: str) -> str:
    return f"display-{display_id}"


def display_status_id(display_id: str) -> str:
    return f"display-{display_id}-status"
