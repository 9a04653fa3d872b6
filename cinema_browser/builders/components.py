from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from cinema_browser.core.structure import Structure

_UNSAFE_ID_CHARS = re.compile(r"[^A-Za-z0-9_-]")


def component_id(structure: Structure, suffix: str) -> str:
    """Stable Dash component id for a part of a structure's content."""
    parts = (structure.display.id, structure.id, suffix)
    return "--".join(_UNSAFE_ID_CHARS.sub("_", str(p)) for p in parts)


@dataclass
class Control:
    """
    An interactive component built for an input structure.

    When the user changes 'prop' on the component, the UI passes the new value to
    'on_change', which is expected to update the structure's query and call update().
    """

    component_id: str
    component: Any
    prop: str
    on_change: Callable[[Any], None]


class View:
    """
    A component whose 'prop' is recomputed by a builder, usually from an update listener.

    set() keeps the value and the component in sync, so a layout built after activation
    already shows the latest value and the UI can push new values to the browser.
    """

    def __init__(self, component_id: str, component: Any, prop: str) -> None:
        self.component_id = component_id
        self.component = component
        self.prop = prop
        self.value = getattr(component, prop, None)

    def set(self, value: Any) -> None:
        self.value = value
        setattr(self.component, self.prop, value)
