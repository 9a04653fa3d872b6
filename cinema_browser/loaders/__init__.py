"""
Data loaders for sources: the text transport and the mime-type dispatching super loader.
"""

from .io import fetch_text
from .dispatch import csv_loader, parse_delimited, super_loader, tsv_loader

__all__ = ["fetch_text", "parse_delimited", "super_loader", "csv_loader", "tsv_loader"]
