"""
Core domain layer: sources, displays, input/output structures and the database that links them
"""

from .source import Record, Source, SourceInfo
from .structure import InputStructure, OutputStructure, Structure, StructureInfo
from .display import Display, DisplayState
from .database import Database

__all__ = [
    "Record",
    "Source",
    "SourceInfo",
    "Structure",
    "StructureInfo",
    "InputStructure",
    "OutputStructure",
    "Display",
    "DisplayState",
    "Database",
]
