"""Core data models for Doclist."""

from .entities import (
    CatalogEntry,
    EmptySummary,
    Extracted,
    FrontMatter,
    MissingDelimiter,
    MissingSummaryKey,
    UnterminatedBlock,
)

__all__ = [
    "CatalogEntry",
    "EmptySummary",
    "Extracted",
    "FrontMatter",
    "MissingDelimiter",
    "MissingSummaryKey",
    "UnterminatedBlock",
]
