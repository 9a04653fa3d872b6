from __future__ import annotations

from typing import Dict, List, Optional

from cinema_browser.core.structure import Builder


class BuilderRegistry:
    """
    Registry of builders keyed by structure type, so the super builder can dispatch on the
    'type' declared in the database JSON.

    Design Notes:
    - Each type tag maps to exactly one builder; registering a tag twice is an error
    - Lookups for unknown tags return the fallback builder instead of failing, so one unsupported
      structure never stops the rest of a display from building
    """

    def __init__(self, fallback: Optional[Builder] = None):
        self._builders: Dict[str, Builder] = {}
        self.fallback = fallback

    def register(self, type_tag: str, builder: Builder) -> None:
        """
        Register a builder for the given structure type.

        Raises:
            TypeError: if builder is not callable
            ValueError: if a builder for the same type is already registered
        """
        if not callable(builder):
            raise TypeError(f"Builder for '{type_tag}' must be callable")

        if type_tag in self._builders:
            raise ValueError(f"Builder for '{type_tag}' already registered")

        self._builders[type_tag] = builder

    def get(self, type_tag: Optional[str]) -> Builder:
        """
        :return: the builder for type_tag, or the fallback builder

        Raises:
            KeyError: if the type is unknown and there is no fallback
        """
        builder = self._builders.get(type_tag) if type_tag is not None else None
        if builder is not None:
            return builder
        if self.fallback is None:
            raise KeyError(f"No builder registered for type '{type_tag}'")
        return self.fallback

    def __contains__(self, type_tag: str) -> bool:
        return type_tag in self._builders

    def types(self) -> List[str]:
        return list(self._builders)
