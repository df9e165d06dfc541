"""Recursive discovery of Markdown documents under a documents root."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from doclist.constants.config import DEFAULT_EXCLUDED_DIRS
from doclist.constants.discovery import DOCUMENT_EXTENSION, HIDDEN_ENTRY_PREFIX
from doclist.exceptions import DocsRootError
from doclist.types import DocumentRef

logger = logging.getLogger(__name__)


def discover_documents(
    root: Path,
    exclude_dirs: Iterable[str] = DEFAULT_EXCLUDED_DIRS,
) -> list[DocumentRef]:
    """Return relative POSIX paths of every document under *root*, sorted.

    Directories named in *exclude_dirs* or starting with a dot are skipped at
    any depth. The result is sorted once over the whole flattened list by
    plain string comparison, so nested files interleave with their siblings.
    """
    if not root.exists():
        raise DocsRootError(f"Documents directory not found: {root}")
    if not root.is_dir():
        raise DocsRootError(f"Documents path is not a directory: {root}")

    excluded = frozenset(exclude_dirs)
    found: list[DocumentRef] = []
    _walk(root, (), excluded, found)
    logger.debug("Discovered %d document(s) under %s", len(found), root)
    return sorted(found)


def is_skipped_directory(name: str, excluded: frozenset[str]) -> bool:
    """Return True when a directory segment must not be descended into."""
    return name in excluded or name.startswith(HIDDEN_ENTRY_PREFIX)


def _walk(
    directory: Path,
    prefix: tuple[str, ...],
    excluded: frozenset[str],
    found: list[DocumentRef],
) -> None:
    try:
        entries = list(directory.iterdir())
    except OSError as exc:
        raise DocsRootError(f"Cannot read documents directory {directory}: {exc}") from exc

    for entry in entries:
        if entry.is_dir() and not entry.is_symlink():
            if is_skipped_directory(entry.name, excluded):
                logger.debug("Skipping directory %s", "/".join((*prefix, entry.name)))
                continue
            _walk(entry, (*prefix, entry.name), excluded, found)
        elif entry.is_file() and entry.name.endswith(DOCUMENT_EXTENSION):
            found.append("/".join((*prefix, entry.name)))
