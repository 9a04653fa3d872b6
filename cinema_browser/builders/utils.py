from __future__ import annotations

import logging
import math
import re
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional

from cinema_browser.loaders.io import is_remote

if TYPE_CHECKING:
    from cinema_browser.core.database import Database

logger = logging.getLogger(__name__)

# Route the host app serves a local database directory under
ASSET_ROUTE = "/cinema-files"


def _as_number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(number) else number


def unique_numeric_values(values: Iterable[Any]) -> List[Any]:
    """
    Return the unique values sorted numerically, ignoring anything that is not a number.
    """
    seen: List[Any] = []
    for v in values:
        if _as_number(v) is None:
            logger.info("NaN value %r will be ignored.", v)
            continue
        if v not in seen:
            seen.append(v)
    return sorted(seen, key=_as_number)


def unique_ordinal_values(values: Iterable[Any]) -> List[Any]:
    """Return the unique values (numeric or otherwise) in first-seen order."""
    seen: List[Any] = []
    for v in values:
        if v not in seen:
            seen.append(v)
    return seen


class UriParser:
    """
    Turns a record into a file name using a structure's 'uri_format' argument.

    Control sequences (%s, %d, %f, %x, %X) not escaped with a backslash are replaced, in
    order, by the record's values for the fields named by arguments "0", "1", ...
    """

    CONTROL_RE = re.compile(r"(?:^|[^\\])%[sdfxX]")

    def __init__(self, args: Dict[str, Any]) -> None:
        self.pattern: str = str(args.get("uri_format", ""))

        # A match includes the character before '%' (to rule out an escape); give it back to
        # the preceding literal part.
        matches = self.CONTROL_RE.findall(self.pattern)
        self.split_pattern: List[str] = self.CONTROL_RE.split(self.pattern)

        self.keys: List[Optional[str]] = []
        for i, match in enumerate(matches):
            if len(match) != 2:
                self.split_pattern[i] += match[0]
            key = args.get(str(i))
            if not key:
                logger.error(
                    "Missing argument %s for uri_format %s", i, self.pattern,
                    extra={"uri_format": self.pattern},
                )
            self.keys.append(key)

    def parse(self, record: Dict[str, Any]) -> str:
        result = self.split_pattern[0]
        for i, key in enumerate(self.keys):
            if key and record.get(key) is not None:
                result += str(record[key])
                result += self.split_pattern[i + 1]
        return result


def asset_url(database: Optional[Database], relative: str) -> str:
    """
    URL for a file that lives in the database directory.

    Remote databases are addressed directly; local ones through the host app's file route.
    """
    directory = database.directory if database is not None else ""
    if is_remote(directory):
        return directory + relative
    return f"{ASSET_ROUTE}/{relative.lstrip('/')}"
