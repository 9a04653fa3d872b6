from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional

if TYPE_CHECKING:
    from .database import Database

logger = logging.getLogger(__name__)

Record = Dict[str, Any]
LoadCallback = Callable[[], None]
Loader = Callable[["Source", LoadCallback], None]


@dataclass(frozen=True)
class SourceInfo:
    """
    Location metadata a loader needs to fetch a source.

    - uri: path to the source file, already joined onto the database directory
    - table: the 'table' value of the source in the database JSON
    - mime: the 'mime' value of the source in the database JSON
    """

    uri: str
    table: Optional[str] = None
    mime: Optional[str] = None


class Source:
    """
    A single source of a Cinema database: one ordered collection of records.

    The record list is replaced (never mutated in place) on every load, and is shared by
    reference with every structure reading from it, so structures must treat it as read-only.
    """

    def __init__(
        self,
        id: str,
        raw: Dict[str, Any],
        database: Optional[Database] = None,
        loader: Optional[Loader] = None,
    ) -> None:
        self.id = id
        self.db = database

        directory = database.directory if database is not None else ""
        self.info = SourceInfo(
            uri=directory + str(raw.get("uri", "")),
            table=raw.get("table"),
            mime=raw.get("mime"),
        )

        self.data: List[Record] = []
        self.loader: Optional[Loader] = loader

    def load(
        self,
        loader: Optional[Loader] = None,
        callback: Optional[LoadCallback] = None,
    ) -> None:
        """
        Populate `data` by calling a loader, then call `callback` once loading has finished.

        :param loader: loader to use instead of the one assigned to this source
        :param callback: called with no arguments when the loader completes
        """
        done = callback if callback is not None else _noop

        chosen = loader or self.loader
        if chosen is None:
            logger.warning("No loader set for source %s!", self.id, extra={"source": self.id})
            done()
            return

        logger.debug(
            "Loading source",
            extra={"source": self.id, "uri": self.info.uri, "mime": self.info.mime},
        )
        chosen(self, done)

    def __repr__(self) -> str:
        return f"Source(id={self.id!r}, uri={self.info.uri!r}, n_records={len(self.data)})"


def _noop() -> None:
    return None
