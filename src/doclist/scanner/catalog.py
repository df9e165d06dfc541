"""End-to-end catalog assembly: walk, extract, report."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from doclist.constants.config import DEFAULT_EXCLUDED_DIRS
from doclist.model import CatalogEntry
from doclist.parsers import extract_front_matter
from doclist.reporting import CatalogReporter
from doclist.scanner.discovery import discover_documents

logger = logging.getLogger(__name__)


def build_catalog(
    root: Path,
    exclude_dirs: Iterable[str] = DEFAULT_EXCLUDED_DIRS,
) -> tuple[CatalogEntry, ...]:
    """Walk *root* and extract front matter for each document, in walker order.

    Raises ``DocsRootError`` before any extraction when *root* is unusable.
    """
    refs = discover_documents(root, exclude_dirs)
    entries = tuple(CatalogEntry(path=ref, front_matter=extract_front_matter(root / ref)) for ref in refs)

    failures = Counter(entry.front_matter.status for entry in entries if entry.front_matter.status != "success")
    if failures:
        breakdown = ", ".join(f"{status}={count}" for status, count in sorted(failures.items()))
        logger.info("%d of %d document(s) lack usable front matter (%s)", failures.total(), len(entries), breakdown)
    return entries


def list_documents(
    root: Path,
    stream: TextIO,
    *,
    exclude_dirs: Iterable[str] = DEFAULT_EXCLUDED_DIRS,
    docs_label: str | None = None,
    color: bool = False,
) -> tuple[CatalogEntry, ...]:
    """Build the catalog for *root* and write the rendered report to *stream*."""
    entries = build_catalog(root, exclude_dirs)
    reporter = CatalogReporter(entries, docs_label=docs_label or root.as_posix(), color=color)
    reporter.write(stream)
    return entries
