"""Front-matter extraction results and catalog entries.

``FrontMatter`` is a tagged union: each extraction status has its own
variant, so consumers branch on the variant type rather than on exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, TypeAlias

from doclist.types import DocumentRef, ExtractionStatus


@dataclass(frozen=True)
class Extracted:
    """Header block parsed and carried a non-empty summary."""

    summary: str
    read_when: tuple[str, ...] = ()

    status: ClassVar[ExtractionStatus] = "success"


@dataclass(frozen=True)
class MissingDelimiter:
    """Document does not open with a ``---`` line."""

    status: ClassVar[ExtractionStatus] = "missing-delimiter"

    @property
    def summary(self) -> None:
        return None

    @property
    def read_when(self) -> tuple[str, ...]:
        return ()


@dataclass(frozen=True)
class UnterminatedBlock:
    """Header block opened but no closing ``---`` line follows."""

    status: ClassVar[ExtractionStatus] = "unterminated-block"

    @property
    def summary(self) -> None:
        return None

    @property
    def read_when(self) -> tuple[str, ...]:
        return ()


@dataclass(frozen=True)
class MissingSummaryKey:
    """Header block has no ``summary:`` line."""

    read_when: tuple[str, ...] = ()

    status: ClassVar[ExtractionStatus] = "missing-summary-key"

    @property
    def summary(self) -> None:
        return None


@dataclass(frozen=True)
class EmptySummary:
    """``summary:`` is present but normalizes to an empty string."""

    read_when: tuple[str, ...] = ()

    status: ClassVar[ExtractionStatus] = "empty-summary"

    @property
    def summary(self) -> None:
        return None


FrontMatter: TypeAlias = Extracted | MissingDelimiter | UnterminatedBlock | MissingSummaryKey | EmptySummary


@dataclass(frozen=True)
class CatalogEntry:
    """One discovered document paired with its extraction result."""

    path: DocumentRef
    front_matter: FrontMatter
