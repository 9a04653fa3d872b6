from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional

from .source import Record

if TYPE_CHECKING:
    from .database import Database
    from .display import Display
    from .source import Source

logger = logging.getLogger(__name__)

Builder = Callable[["Structure"], None]
UpdateListener = Callable[[], None]

INPUT = "input"
OUTPUT = "output"


@dataclass(frozen=True)
class StructureInfo:
    """
    Meta information about a structure, as declared in the database JSON.

    'type' and 'arguments' are opaque to the core and only interpreted by builders.
    """

    type: Optional[str]
    label: Optional[str]
    io: str
    arguments: Dict[str, Any] = field(default_factory=dict)


class Structure(ABC):
    """
    Abstract base class for a single structure of a display.

    Only the two variants, InputStructure and OutputStructure, can be constructed.

    - query: for an input, the records it currently selects; for an output, the records it
      should render
    - builders: callables invoked with this structure to create its content
    - content: the rendered components produced by the builders
    """

    def __init__(
        self,
        id: str,
        raw: Dict[str, Any],
        display: Display,
        database: Optional[Database] = None,
    ) -> None:
        self.id = id
        self.db = database

        arguments = raw.get("arguments")
        if arguments is None:
            arguments = {}
        elif not isinstance(arguments, dict):
            logger.warning(
                "Arguments of structure %s must be an object, got %s. Ignoring them.",
                id,
                type(arguments).__name__,
                extra={"structure": id, "display": display.id},
            )
            arguments = {}

        self.info = StructureInfo(
            type=raw.get("type"),
            label=raw.get("label"),
            io=raw.get("io"),
            arguments=arguments,
        )

        self.display = display
        self.source: Optional[Source] = display.source

        self.query: List[Record] = []
        self.builders: List[Builder] = []
        self.content: List[Any] = []

    @property
    def data(self) -> List[Record]:
        """The records of this structure's source, or an empty list when there is no source."""
        if self.source is None:
            return []
        return self.source.data

    def build(self, builder: Optional[Builder] = None) -> None:
        """
        Create the content of this structure. Existing content is cleared first.

        :param builder: builder to call instead of the registered ones
        """
        self.content = []
        if builder is not None:
            builder(self)
        elif not self.builders:
            logger.warning(
                "No builders set for structure %s!",
                self.id,
                extra={"structure": self.id, "display": self.display.id},
            )
        else:
            for b in self.builders:
                b(self)

    @abstractmethod
    def update(self) -> None:
        raise NotImplementedError()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self.id!r}, type={self.info.type!r}, "
            f"n_query={len(self.query)})"
        )


class InputStructure(Structure):
    """A structure whose query is the user's selection."""

    def update(self) -> None:
        """Called by builders whenever the selection changes."""
        self.display.update_input()


class OutputStructure(Structure):
    """A structure that renders the records its display hands to it."""

    def __init__(
        self,
        id: str,
        raw: Dict[str, Any],
        display: Display,
        database: Optional[Database] = None,
    ) -> None:
        super().__init__(id, raw, display, database)
        self.update_listeners: List[UpdateListener] = []

    def update(self) -> None:
        """Notify every update listener that the query has changed."""
        if not self.update_listeners:
            logger.warning(
                "No update listeners set for output structure %s! "
                "Did you forget to set one in the structure's builder?",
                self.id,
                extra={"structure": self.id, "display": self.display.id},
            )
            return

        for listener in self.update_listeners:
            listener()
