"""
Builders for output structures.

Each builder creates a component and registers an update listener that re-renders it from
structure.query whenever the display pushes a new selection.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Sequence

import pandas as pd
from dash import dash_table, dcc, html

from cinema_browser.core.source import Record
from cinema_browser.core.structure import OUTPUT, Structure
from cinema_browser.builders.common import invalid_builder
from cinema_browser.builders.components import View, component_id
from cinema_browser.builders.graph import Graph, LineGraph, ScatterGraph
from cinema_browser.builders.utils import UriParser, asset_url
from cinema_browser.loaders.io import fetch_text
from cinema_browser.loaders.dispatch import parse_delimited

logger = logging.getLogger(__name__)


def _table_rows(records: List[Record]) -> List[Dict[str, Any]]:
    return [dict(r) for r in records]


def output_table_builder(structure: Structure) -> None:
    """Table of the records in the output's query."""
    data = structure.data
    keys = list(data[0].keys()) if data else []

    view = View(
        component_id(structure, "table"),
        dash_table.DataTable(
            id=component_id(structure, "table"),
            data=[],
            columns=[{"name": k, "id": k} for k in keys],
            page_size=20,
        ),
        "data",
    )
    structure.content.append(view)

    def on_update() -> None:
        view.set(_table_rows(structure.query))

    structure.update_listeners.append(on_update)


def image_builder(structure: Structure) -> None:
    """One image per queried record, named by arguments.uri_format."""
    if structure.info.io != OUTPUT:
        invalid_builder(structure)
        return

    parser = UriParser(structure.info.arguments)
    view = View(
        component_id(structure, "images"),
        html.Div(id=component_id(structure, "images"), className="cinema-content cinema-images"),
        "children",
    )
    structure.content.append(view)

    def on_update() -> None:
        view.set([
            html.Img(src=asset_url(structure.db, parser.parse(r)), className="cinema-image")
            for r in structure.query
        ])

    structure.update_listeners.append(on_update)


def load_xy(uri: str, xy: Sequence[str]) -> pd.DataFrame:
    """
    Read a CSV and return its 'xy' columns as numeric 'x'/'y' columns.
    Rows that are not numeric in both are dropped.
    """
    x_key, y_key = xy[0], xy[1]
    frame = pd.DataFrame(parse_delimited(fetch_text(uri), ","), columns=[x_key, y_key])
    return pd.DataFrame(
        {
            "x": pd.to_numeric(frame[x_key], errors="coerce"),
            "y": pd.to_numeric(frame[y_key], errors="coerce"),
        }
    ).dropna()


def _make_graph(args: Dict[str, Any]) -> Graph:
    style = args.get("style")
    if style == "scatter":
        return ScatterGraph(args)
    if style != "line":
        logger.warning("Unrecognized graph style %s. Defaulting to line.", style)
    return LineGraph(args)


def simple_plot_2d_builder(structure: Structure) -> None:
    """
    For each queried record, load the CSV named by arguments.uri_format and plot the columns
    named by arguments.xy as a line or scatter graph.
    """
    if structure.info.io != OUTPUT:
        invalid_builder(structure)
        return

    args = structure.info.arguments
    parser = UriParser(args)
    graph = _make_graph(args)
    xy = args.get("xy") or ["x", "y"]
    directory = structure.db.directory if structure.db is not None else ""

    view = View(
        component_id(structure, "graph"),
        dcc.Graph(id=component_id(structure, "graph"), figure=graph.figure),
        "figure",
    )
    structure.content.append(view)

    def on_update() -> None:
        datasets = [load_xy(directory + parser.parse(r), xy) for r in structure.query]
        graph.set_data(datasets)
        view.set(graph.figure)

    structure.update_listeners.append(on_update)
