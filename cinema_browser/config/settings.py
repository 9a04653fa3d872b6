from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_SPEC = "data/cinema.json"
DEFAULT_PORT = 8051


@dataclass(frozen=True)
class AppSettings:
    """
    Settings for the host application, read from the environment.

    - CINEMA_SPEC: path or URL of the database JSON
    - PORT: preferred port (the next free one is used if it is taken)
    - DEBUG: "1" runs Dash in debug mode
    """

    spec_url: str = DEFAULT_SPEC
    port: int = DEFAULT_PORT
    debug: bool = False

    @classmethod
    def from_env(cls) -> AppSettings:
        return cls(
            spec_url=os.getenv("CINEMA_SPEC", DEFAULT_SPEC),
            port=int(os.getenv("PORT", str(DEFAULT_PORT))),
            debug=os.getenv("DEBUG", "0") == "1",
        )
