from __future__ import annotations

import logging

from dash import html

from cinema_browser.core.structure import Structure

logger = logging.getLogger(__name__)


def header_builder(structure: Structure) -> None:
    structure.content.append(
        html.Div(structure.info.label, className="cinema-header")
    )


def invalid_builder(structure: Structure) -> None:
    """
    Fallback for any structure type (or io) there is no builder for.
    Shows a warning in place of the structure.
    """
    logger.warning(
        "No builder for structure type",
        extra={
            "structure": structure.id,
            "type": structure.info.type,
            "io": structure.info.io,
        },
    )
    structure.content.append(
        html.Div(
            f"Could not create structure for type {structure.info.type} with io {structure.info.io}",
            className="cinema-content cinema-invalid",
        )
    )
