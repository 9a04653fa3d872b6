"""
Render plugins for structures: the builder registry, the default super builder and the
components builders hand to the UI.
"""

from .components import Control, View
from .registry import BuilderRegistry
from .dispatch import default_registry, make_super_builder, super_builder

__all__ = [
    "Control",
    "View",
    "BuilderRegistry",
    "default_registry",
    "make_super_builder",
    "super_builder",
]
