from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class SpecDocument:
    """
    Parsed Cinema SpecD v2 database document.

    Keeps the raw JSON and exposes the three top-level sections. Anything missing or of the
    wrong type reads as an empty mapping so the graph can still be built from what is there.
    """

    raw: Dict[str, Any] = field(default_factory=dict)

    @property
    def cinema(self) -> Dict[str, Any]:
        return _section(self.raw, "cinema")

    @property
    def sources(self) -> Dict[str, Dict[str, Any]]:
        return _section(self.raw, "sources")

    @property
    def displays(self) -> Dict[str, Dict[str, Any]]:
        return _section(self.raw, "displays")

    @classmethod
    def from_raw(cls, raw: Any) -> SpecDocument:
        return cls(raw=raw if isinstance(raw, dict) else {})


def _section(raw: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = raw.get(key)
    return value if isinstance(value, dict) else {}
