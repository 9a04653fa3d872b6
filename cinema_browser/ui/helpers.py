from __future__ import annotations

from typing import Any, List

from cinema_browser.builders.components import Control, View
from cinema_browser.core.display import Display
from cinema_browser.core.structure import Structure


def render_content(structure: Structure) -> List[Any]:
    """The Dash components of a structure's content, unwrapping controls and views."""
    rendered: List[Any] = []
    for item in structure.content:
        if isinstance(item, (Control, View)):
            rendered.append(item.component)
        else:
            rendered.append(item)
    return rendered


def display_controls(display: Display) -> List[Control]:
    return [
        item
        for structure in display.structures.values()
        for item in structure.content
        if isinstance(item, Control)
    ]


def display_views(display: Display) -> List[View]:
    return [
        item
        for structure in display.structures.values()
        for item in structure.content
        if isinstance(item, View)
    ]


def display_status(display: Display) -> str:
    n_records = len(display.data)
    n_shown = len(next(iter(display.outputs.values())).query) if display.outputs else n_records
    source = display.source.id if display.source is not None else "no source"
    return f"{source} · {n_shown} of {n_records} records selected"
