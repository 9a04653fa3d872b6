"""
Builders for input structures.

Each builder creates its controls, sets an initial query, and wires the controls so that a
user change recomputes the query and calls structure.update().
"""
from __future__ import annotations

import logging
from typing import Any, List, Optional

from dash import dash_table, dcc, html

from cinema_browser.core.structure import INPUT, Structure
from cinema_browser.builders.common import invalid_builder
from cinema_browser.builders.components import Control, View, component_id
from cinema_browser.builders.utils import unique_numeric_values, unique_ordinal_values

logger = logging.getLogger(__name__)


def _clamp_index(value: Any, n: int) -> int:
    try:
        index = int(value)
    except (TypeError, ValueError):
        index = 0
    return min(max(index, 0), max(n - 1, 0))


def _index_slider(structure: Structure, suffix: str, values: List[Any]) -> dcc.Slider:
    return dcc.Slider(
        id=component_id(structure, suffix),
        min=0,
        max=max(len(values) - 1, 0),
        step=1,
        value=0,
        marks=None,
        updatemode="drag",
    )


def scalar_builder(structure: Structure) -> None:
    """
    Slider over the unique numeric values of arguments.value (optionally limited to
    arguments.range). Selects the records equal to the slider's value.
    """
    if structure.info.io != INPUT:
        invalid_builder(structure)
        return

    args = structure.info.arguments
    if args.get("interpolate"):
        logger.warning(
            "Scalar input does not currently support the 'interpolate' argument",
            extra={"structure": structure.id},
        )

    key = args.get("value")
    values = unique_numeric_values(r.get(key) for r in structure.data)

    value_range = args.get("range")
    if value_range:
        lo, hi = float(value_range[0]), float(value_range[1])
        values = [v for v in values if lo <= float(v) <= hi]

    units = args.get("units") or ""
    label = View(
        component_id(structure, "label"),
        html.Div(className="cinema-label", id=component_id(structure, "label")),
        "children",
    )
    slider = _index_slider(structure, "slider", values)
    selected = 0

    def update_query() -> None:
        if not values:
            label.set("")
            structure.query = []
            return
        val = values[selected]
        label.set(f"{val} {units}".strip())
        structure.query = [r for r in structure.data if r.get(key) == val]

    def on_change(value: Any) -> None:
        nonlocal selected
        selected = _clamp_index(value, len(values))
        update_query()
        structure.update()

    structure.content.append(label)
    structure.content.append(Control(slider.id, slider, "value", on_change))
    update_query()


def category_builder(structure: Structure) -> None:
    """
    Drop-down of the unique values of arguments.value.
    Selects the records equal to the chosen value.
    """
    if structure.info.io != INPUT:
        invalid_builder(structure)
        return

    key = structure.info.arguments.get("value")
    values = [v for v in unique_ordinal_values(r.get(key) for r in structure.data) if v is not None]

    dropdown = dcc.Dropdown(
        id=component_id(structure, "select"),
        options=[{"label": str(v), "value": v} for v in values],
        value=values[0] if values else None,
        clearable=False,
    )

    def update_query(val: Optional[Any]) -> None:
        structure.query = [r for r in structure.data if r.get(key) == val]

    def on_change(value: Any) -> None:
        update_query(value)
        structure.update()

    structure.content.append(Control(dropdown.id, dropdown, "value", on_change))
    update_query(dropdown.value)


def camera_orbit_builder(structure: Structure) -> None:
    """
    Orbit control over two numeric dimensions named by arguments.phi_theta.
    Each dimension steps through its unique values; selects the records matching both.
    """
    if structure.info.io != INPUT:
        invalid_builder(structure)
        return

    phi_theta = structure.info.arguments.get("phi_theta") or [None, None]
    p_key, t_key = phi_theta[0], phi_theta[1]
    p_vals = unique_numeric_values(r.get(p_key) for r in structure.data)
    t_vals = unique_numeric_values(r.get(t_key) for r in structure.data)
    p_index = t_index = 0

    def update_query() -> None:
        if not p_vals or not t_vals:
            structure.query = []
            return
        phi, theta = p_vals[p_index], t_vals[t_index]
        structure.query = [
            r for r in structure.data if r.get(p_key) == phi and r.get(t_key) == theta
        ]

    def on_phi(value: Any) -> None:
        nonlocal p_index
        p_index = _clamp_index(value, len(p_vals))
        update_query()
        structure.update()

    def on_theta(value: Any) -> None:
        nonlocal t_index
        t_index = _clamp_index(value, len(t_vals))
        update_query()
        structure.update()

    phi_slider = _index_slider(structure, "phi", p_vals)
    theta_slider = _index_slider(structure, "theta", t_vals)

    structure.content.append(html.Small(f"phi ({p_key})"))
    structure.content.append(Control(phi_slider.id, phi_slider, "value", on_phi))
    structure.content.append(html.Small(f"theta ({t_key})"))
    structure.content.append(Control(theta_slider.id, theta_slider, "value", on_theta))
    update_query()


def input_table_builder(structure: Structure) -> None:
    """
    Table of every record with a checkbox per row; the query holds the checked rows.
    """
    data = structure.data
    keys = list(data[0].keys()) if data else []

    table = dash_table.DataTable(
        id=component_id(structure, "table"),
        data=[dict(r) for r in data],
        columns=[{"name": k, "id": k} for k in keys],
        row_selectable="multi",
        selected_rows=[],
        page_size=20,
    )

    def on_change(selected_rows: Any) -> None:
        rows = selected_rows or []
        structure.query = [data[i] for i in rows if 0 <= i < len(data)]
        structure.update()

    structure.content.append(Control(table.id, table, "selected_rows", on_change))
    structure.query = []
