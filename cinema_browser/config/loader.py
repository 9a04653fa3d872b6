from __future__ import annotations

import json
import logging
import re

from cinema_browser.config.model import SpecDocument
from cinema_browser.core.exceptions import SpecError
from cinema_browser.loaders.io import fetch_text

logger = logging.getLogger(__name__)

_DIRECTORY_RE = re.compile(r"(.*)[/\\]")


def resolve_directory(url: str) -> str:
    """
    Return the directory part of a spec location, with a trailing '/'.

    Everything up to the last '/' or '\\' is kept, so 'db/cinema.json' gives 'db/'.
    A bare file name gives '' (the current directory).
    """
    match = _DIRECTORY_RE.match(url)
    if match is None:
        return ""
    return match.group(1) + "/"


def load_spec(url: str) -> SpecDocument:
    """
    Fetch and parse the database document at 'url'.

    :param url: local path or http(s) URL of the database JSON
    :return: the parsed SpecDocument
    :raises SpecError: if nothing could be fetched or the text is not a JSON object
    """
    logger.info("Loading database spec", extra={"spec_url": url})

    text = fetch_text(url)
    if not text:
        raise SpecError(f"Error retrieving JSON {url}")

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise SpecError(f"Invalid JSON in {url}: {e}") from e

    if not isinstance(raw, dict):
        raise SpecError(f"Database spec {url} must be a JSON object, got {type(raw).__name__}")

    return SpecDocument.from_raw(raw)
