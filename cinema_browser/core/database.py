from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, Iterator, Optional, Sequence, Union

from cinema_browser.config import loader as config_loader
from cinema_browser.config.model import SpecDocument
from cinema_browser.core.exceptions import SpecError
from cinema_browser.validation.spec_validation import validate_spec

from .display import Display
from .source import Loader, Source
from .structure import Builder, Structure

logger = logging.getLogger(__name__)

Builders = Union[Builder, Sequence[Builder]]


class Database:
    """
    The whole of a single Cinema SpecD v2 database.

    Creates every source and display declared in the database JSON and links them. Sources
    are created first so displays can resolve their 'source' reference.

    Loaders and builders are passed in explicitly: 'loader' is assigned to every source and
    'builders' are appended to every structure.
    """

    def __init__(
        self,
        spec: SpecDocument,
        directory: str = "",
        *,
        loader: Optional[Loader] = None,
        builders: Optional[Builders] = None,
    ) -> None:
        self.directory = directory
        self.spec = spec
        self.json = spec.raw
        self.info = spec.cinema

        issues = validate_spec(spec)
        if issues:
            logger.warning(
                "There are errors present in the JSON. Some things may work unexpectedly or not at all.",
                extra={"issues": [f"{i.code}: {i.message}" for i in issues]},
            )

        self.sources: Dict[str, Source] = {}
        for key, raw in spec.sources.items():
            self.sources[key] = Source(key, raw if isinstance(raw, dict) else {}, self)

        self.displays: Dict[str, Display] = {}
        for key, raw in spec.displays.items():
            self.displays[key] = Display(key, raw if isinstance(raw, dict) else {}, self)

        if loader is not None:
            self.set_loaders_for_all(loader)
        if builders is not None:
            self.add_builders_to_all(builders)

        logger.info(
            "Database created",
            extra={
                "directory": directory,
                "n_sources": len(self.sources),
                "n_displays": len(self.displays),
            },
        )

    @classmethod
    def load(
        cls,
        url: str,
        callback: Optional[Callable[[Database], None]] = None,
        *,
        loader: Optional[Loader] = None,
        builders: Optional[Builders] = None,
    ) -> Database:
        """
        Create a database from the JSON document at 'url'.

        A document that cannot be fetched or parsed gives an empty database (logged).

        :param url: local path or http(s) URL of the database JSON
        :param callback: called with the database once it has finished loading
        """
        directory = config_loader.resolve_directory(url)
        try:
            spec = config_loader.load_spec(url)
        except SpecError as e:
            logger.error("Could not load database spec", extra={"spec_url": url, "error": str(e)})
            spec = SpecDocument()

        db = cls(spec, directory, loader=loader, builders=builders)
        if callback is not None:
            callback(db)
        return db

    def iter_structures(self) -> Iterator[Structure]:
        for display in self.displays.values():
            yield from display.structures.values()

    def add_builders_to_all(self, builders: Builders) -> None:
        """
        Add the given builder (or builders) to the builders of every structure in this database.
        """
        to_add = list(builders) if _is_sequence(builders) else [builders]
        for structure in self.iter_structures():
            structure.builders.extend(to_add)

    def set_loaders_for_all(self, loader: Loader) -> None:
        """Set every source in this database to use the given loader."""
        for source in self.sources.values():
            source.loader = loader

    def activate_all(self) -> None:
        for display in self.displays.values():
            display.activate()

    def __repr__(self) -> str:
        return (
            f"Database(directory={self.directory!r}, sources={list(self.sources)!r}, "
            f"displays={list(self.displays)!r})"
        )


def _is_sequence(value: object) -> bool:
    return isinstance(value, Iterable) and not callable(value)
