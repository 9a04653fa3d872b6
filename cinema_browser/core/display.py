from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from .source import Record
from .structure import INPUT, OUTPUT, InputStructure, OutputStructure, Structure

if TYPE_CHECKING:
    from .database import Database
    from .source import Source

logger = logging.getLogger(__name__)


class DisplayState(str, Enum):
    UNACTIVATED = "unactivated"
    LOADING = "loading"
    READY = "ready"


class Display:
    """
    A single display of a Cinema database.

    Links one source to a set of structures. Structures are partitioned into inputs and
    outputs by their declared io value; whenever an input's query changes the display
    intersects all input queries and hands the result to every output.
    """

    def __init__(
        self,
        id: str,
        raw: Dict[str, Any],
        database: Database,
    ) -> None:
        self.id = id
        self.label: Optional[str] = raw.get("label")
        self.db = database
        self.state = DisplayState.UNACTIVATED

        source_id = raw.get("source")
        self.source: Optional[Source] = (
            database.sources.get(source_id) if isinstance(source_id, str) else None
        )
        if self.source is None:
            logger.warning(
                "Source %s for display %s was not found in sources.",
                source_id,
                id,
                extra={"display": id, "source": source_id},
            )

        self.structures: Dict[str, Structure] = {}
        self.inputs: Dict[str, InputStructure] = {}
        self.outputs: Dict[str, OutputStructure] = {}

        structures = raw.get("structures") or {}
        if not isinstance(structures, dict):
            logger.warning(
                "Structures of display %s must be an object, got %s. No structures created.",
                id,
                type(structures).__name__,
                extra={"display": id},
            )
            structures = {}

        for key, struct_raw in structures.items():
            io = struct_raw.get("io") if isinstance(struct_raw, dict) else None
            if io == INPUT:
                structure = InputStructure(key, struct_raw, self, database)
                self.structures[key] = self.inputs[key] = structure
            elif io == OUTPUT:
                structure = OutputStructure(key, struct_raw, self, database)
                self.structures[key] = self.outputs[key] = structure
            else:
                logger.warning(
                    "Structure %s has improper io value %r. io must be 'input' or 'output'.",
                    key,
                    io,
                    extra={"display": id, "structure": key},
                )

    @property
    def data(self) -> List[Record]:
        if self.source is None:
            return []
        return self.source.data

    def update_input(self) -> List[Record]:
        """
        Recompute the set of records to display and push it to every output.

        A record is kept when it is (by identity) in the query of every input. With no inputs
        every record is kept. Source order is preserved.

        :return: the combined selection
        """
        selected = [{id(r) for r in structure.query} for structure in self.inputs.values()]

        intersection = [
            record for record in self.data
            if all(id(record) in members for members in selected)
        ]

        logger.debug(
            "Intersection pass",
            extra={
                "display": self.id,
                "n_records": len(self.data),
                "n_inputs": len(self.inputs),
                "n_selected": len(intersection),
            },
        )

        for output in self.outputs.values():
            output.query = list(intersection)
            output.update()

        return intersection

    def activate(self) -> None:
        """Load this display's source, then build every structure once loading has finished."""
        self.state = DisplayState.LOADING

        if self.source is None:
            logger.warning(
                "Display %s has no source; building structures with no records.",
                self.id,
                extra={"display": self.id},
            )
            self._on_loaded()
            return

        self.source.load(callback=self._on_loaded)

    def _on_loaded(self) -> None:
        for structure in self.structures.values():
            structure.build()
        self.update_input()
        self.state = DisplayState.READY

        logger.info(
            "Display activated",
            extra={
                "display": self.id,
                "n_records": len(self.data),
                "n_inputs": len(self.inputs),
                "n_outputs": len(self.outputs),
            },
        )

    def __repr__(self) -> str:
        return (
            f"Display(id={self.id!r}, source={getattr(self.source, 'id', None)!r}, "
            f"n_inputs={len(self.inputs)}, n_outputs={len(self.outputs)})"
        )
