from __future__ import annotations

import logging
from pathlib import Path

import requests

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 30


def is_remote(location: str) -> bool:
    return location.startswith(("http://", "https://"))


def fetch_text(location: str) -> str:
    """
    Return the text contents of a local file or an http(s) URL.

    Failures are logged and give an empty string, never an exception, so callers can
    treat a missing file exactly like an empty one.
    """
    if is_remote(location):
        try:
            resp = requests.get(location, timeout=REQUEST_TIMEOUT)
        except requests.RequestException as e:
            logger.error(
                "Error retrieving %s", location, extra={"location": location, "error": str(e)}
            )
            return ""
        if resp.status_code >= 300:
            logger.error(
                "Error retrieving %s. HTTP Status: %s",
                location,
                resp.status_code,
                extra={"location": location, "status": resp.status_code},
            )
            return ""
        return resp.text

    path = Path(location)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(
            "Error retrieving %s", location, extra={"location": location, "error": str(e)}
        )
        return ""
