from __future__ import annotations

import logging
import os
from typing import Iterable, Optional

from pythonjsonlogger.json import JsonFormatter

LOG_FORMAT_ENV = "CINEMA_BROWSER_LOG_FORMAT"
_FIELDS = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Request logging from the dev server drowns out graph diagnostics
NOISY_LOGGERS = ("werkzeug", "urllib3")


def configure_logging(
        level: int = logging.INFO,
        force_format: Optional[str] = None,
        quiet: Iterable[str] = NOISY_LOGGERS,
) -> None:
    """
    Configure the root logger.

    Output is JSON lines unless plain text is asked for, either through 'force_format'
    ("json" or "plain") or the CINEMA_BROWSER_LOG_FORMAT env var.
    Loggers named in 'quiet' are raised to WARNING.
    """
    format_mode = (force_format or os.getenv(LOG_FORMAT_ENV, "json")).lower()

    if format_mode == "plain":
        formatter: logging.Formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        )
    else:
        formatter = JsonFormatter(_FIELDS)

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)

    for name in quiet:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
