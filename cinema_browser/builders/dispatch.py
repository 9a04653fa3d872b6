from __future__ import annotations

from cinema_browser.core.structure import INPUT, OUTPUT, Builder, Structure
from cinema_browser.builders.common import header_builder, invalid_builder
from cinema_browser.builders.inputs import (
    camera_orbit_builder,
    category_builder,
    input_table_builder,
    scalar_builder,
)
from cinema_browser.builders.outputs import image_builder, output_table_builder, simple_plot_2d_builder
from cinema_browser.builders.registry import BuilderRegistry


def table_builder(structure: Structure) -> None:
    if structure.info.io == INPUT:
        input_table_builder(structure)
    elif structure.info.io == OUTPUT:
        output_table_builder(structure)
    else:
        invalid_builder(structure)


def default_registry() -> BuilderRegistry:
    registry = BuilderRegistry(fallback=invalid_builder)
    registry.register("scalar", scalar_builder)
    registry.register("category", category_builder)
    registry.register("camera-orbit", camera_orbit_builder)
    registry.register("table", table_builder)
    registry.register("image-file-format-by-ext", image_builder)
    registry.register("simple-plot-2d", simple_plot_2d_builder)
    return registry


def make_super_builder(registry: BuilderRegistry) -> Builder:
    """
    Builder that adds a header with the structure's label and then defers to the builder
    registered for the structure's type.
    """

    def super_builder(structure: Structure) -> None:
        header_builder(structure)
        registry.get(structure.info.type)(structure)

    return super_builder


super_builder = make_super_builder(default_registry())
