from __future__ import annotations

import io
import logging
from typing import Callable, Dict, List

import pandas as pd

from cinema_browser.core.source import LoadCallback, Record, Source
from cinema_browser.loaders.io import fetch_text

logger = logging.getLogger(__name__)

CSV_MIME = "text/csv"
TSV_MIME = "text/tsv"


def parse_delimited(text: str, sep: str) -> List[Record]:
    """
    Parse delimited text with a header row into a list of records.

    Column types are inferred by pandas; missing cells become None.
    """
    if not text.strip():
        return []

    try:
        df = pd.read_csv(io.StringIO(text), sep=sep)
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        logger.error("Could not parse delimited text", extra={"sep": sep, "error": str(e)})
        return []

    df = df.astype(object).where(df.notna(), None)
    return df.to_dict(orient="records")


def _delimited_loader(sep: str) -> Callable[[Source, LoadCallback], None]:
    def loader(source: Source, callback: LoadCallback) -> None:
        text = fetch_text(source.info.uri)
        source.data = parse_delimited(text, sep)
        logger.info(
            "Source loaded",
            extra={"source": source.id, "uri": source.info.uri, "n_records": len(source.data)},
        )
        callback()

    return loader


csv_loader = _delimited_loader(",")
tsv_loader = _delimited_loader("\t")

LOADERS_BY_MIME: Dict[str, Callable[[Source, LoadCallback], None]] = {
    CSV_MIME: csv_loader,
    TSV_MIME: tsv_loader,
}


def super_loader(source: Source, callback: LoadCallback) -> None:
    """
    Loader that picks a concrete loader from the source's mime type.

    Unknown mime types are logged and complete immediately with the data left as is.
    """
    loader = LOADERS_BY_MIME.get(source.info.mime)
    if loader is None:
        logger.warning(
            "Super loader does not have a loader for mime type %s",
            source.info.mime,
            extra={"source": source.id, "mime": source.info.mime},
        )
        callback()
        return

    loader(source, callback)
